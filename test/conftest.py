import asyncio
import os
import tempfile
import uuid
from pathlib import Path
from types import SimpleNamespace

import pytest

TEST_DB_DIR = tempfile.mkdtemp(prefix="vidtube-test-")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(TEST_DB_DIR, 'test.db')}"
os.environ["ACCESS_TOKEN_SECRET"] = "access-secret-for-tests-0123456789abcdef"
os.environ["REFRESH_TOKEN_SECRET"] = "refresh-secret-for-tests-0123456789abcdef"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402
from app.application import application  # noqa: E402
from app.db.database import Base, engine  # noqa: E402
from app.utility.storage import UploadedMedia, get_media_storage  # noqa: E402

PASSWORD = "pw123456"


class FakeMediaStorage:
    """In-memory stand-in for the media host"""

    def __init__(self):
        self.uploaded = []
        self.deleted = []
        self.fail = False
        # Called with the local path before each upload is accepted
        self.before_upload = None

    def upload(self, local_path, content_type=None):
        if self.fail:
            return None
        assert os.path.exists(local_path)
        if self.before_upload:
            self.before_upload(local_path)
        url = f"https://media.test/{uuid.uuid4().hex}{Path(local_path).suffix}"
        self.uploaded.append(url)
        is_video = bool(content_type and content_type.startswith("video/"))
        return UploadedMedia(url=url, duration=12.5 if is_video else 0)

    def delete(self, url):
        self.deleted.append(url)
        return True


async def reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


def run(coro):
    return asyncio.run(coro)


class Api:
    """Thin helpers over the test client for the common user journeys"""

    def __init__(self, client: TestClient, storage: FakeMediaStorage):
        self.client = client
        self.storage = storage

    def register(self, username, password=PASSWORD, full_name="A B", email=None, avatar=True):
        files = {"avatar": ("avatar.png", b"png-bytes", "image/png")} if avatar else {}
        return self.client.post(
            "/api/v1/users/register",
            data={
                "fullName": full_name,
                "username": username,
                "email": email or f"{username}@x.com",
                "password": password,
            },
            files=files
        )

    def login(self, username, password=PASSWORD):
        response = self.client.post("/api/v1/users/login", json={"username": username, "password": password})
        # Tests authenticate with explicit bearer headers
        self.client.cookies.clear()
        return response

    def user(self, username):
        registered = self.register(username)
        assert registered.status_code == 201, registered.text
        logged_in = self.login(username)
        assert logged_in.status_code == 200, logged_in.text
        tokens = logged_in.json()["data"]
        return SimpleNamespace(
            id=registered.json()["data"]["id"],
            username=username,
            access_token=tokens["accessToken"],
            refresh_token=tokens["refreshToken"],
            headers={"Authorization": f"Bearer {tokens['accessToken']}"},
        )

    def publish_video(self, owner, title="My video", description="A description"):
        response = self.client.post(
            "/api/v1/video",
            data={"title": title, "description": description},
            files={
                "videoFile": ("clip.mp4", b"mp4-bytes", "video/mp4"),
                "thumbnail": ("thumb.jpg", b"jpg-bytes", "image/jpeg"),
            },
            headers=owner.headers
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    def tweet(self, owner, content="hello world"):
        response = self.client.post("/api/v1/tweets", json={"content": content}, headers=owner.headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    def comment(self, owner, video_id, content="nice video"):
        response = self.client.post(f"/api/v1/comments/{video_id}", json={"content": content}, headers=owner.headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    def playlist(self, owner, name="Favourites", description="Best videos"):
        response = self.client.post(
            "/api/v1/playlist",
            json={"name": name, "description": description},
            headers=owner.headers
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]


@pytest.fixture
def media_storage():
    return FakeMediaStorage()


@pytest.fixture
def client(media_storage):
    run(reset_database())
    application.dependency_overrides[get_media_storage] = lambda: media_storage
    with TestClient(application) as test_client:
        yield test_client
    application.dependency_overrides.clear()


@pytest.fixture
def api(client, media_storage):
    return Api(client, media_storage)


@pytest.fixture
def alice(api):
    return api.user("alice")


@pytest.fixture
def bob(api):
    return api.user("bob")
