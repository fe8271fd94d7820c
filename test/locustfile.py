import random
import string
import time
from locust import HttpUser, task, between, SequentialTaskSet

API = "/api/v1"


def random_string(length=8):
    letters = string.ascii_lowercase
    return ''.join(random.choice(letters) for i in range(length))


class UserScenario(SequentialTaskSet):

    def on_start(self):
        """
        Register and log in before the scenario.
        When the server answers 500+, sleep and restart the scenario.
        """
        self.username = f"user_{random_string(6)}"
        self.email = f"{self.username}@example.com"
        self.password = "testpass123"
        self.video_id = None

        # 1. Register
        with self.client.post(f"{API}/users/register", data={
            "fullName": "Load Tester",
            "username": self.username,
            "email": self.email,
            "password": self.password
        }, files={
            "avatar": ("avatar.png", b"avatar-bytes", "image/png")
        }, catch_response=True) as response:
            if response.status_code >= 500:
                print("!! Server Error during Register. Sleeping 10s...")
                time.sleep(10)
                response.failure("Server Error")
                self.interrupt()
                return

        # 2. Login, the session cookies are kept by the client
        with self.client.post(f"{API}/users/login", json={
            "email": self.email,
            "password": self.password
        }, catch_response=True) as response:
            if response.status_code >= 500:
                print("!! Server Error during Login. Sleeping 10s...")
                time.sleep(10)
                response.failure("Server Error")
                self.interrupt()
                return

    @task
    def browse_dashboard(self):
        self.client.get(f"{API}/healthcheck")
        self.client.get(f"{API}/users/current-user")
        self.client.get(f"{API}/dashboard/stats")
        self.client.get(f"{API}/dashboard/videos")

    @task
    def browse_videos(self):
        limit = random.choice([5, 10, 20])
        response = self.client.get(f"{API}/video?limit={limit}&sortBy=views", name=f"{API}/video")
        if response.status_code != 200:
            return

        items = response.json()["data"]["items"]
        if items:
            self.video_id = random.choice(items)["id"]
            self.client.get(f"{API}/video/{self.video_id}", name=f"{API}/video/[id]")

    @task
    def interact(self):
        self.client.post(f"{API}/tweets", json={"content": f"load test {random_string(12)}"})
        if not self.video_id:
            return
        self.client.post(f"{API}/likes/toggle/v/{self.video_id}", name=f"{API}/likes/toggle/v/[id]")
        self.client.post(
            f"{API}/comments/{self.video_id}",
            json={"content": "nice"},
            name=f"{API}/comments/[id]"
        )

    @task
    def finish_session(self):
        self.client.post(f"{API}/users/logout")
        self.interrupt()


class WebsiteUser(HttpUser):
    tasks = [UserScenario]
    wait_time = between(1, 3)
