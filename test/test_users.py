from app.db.database import AsyncSessionLocal
from app.model.user import UserModel
from conftest import PASSWORD, run


def test_register_excludes_secrets(api, media_storage):
    response = api.register("ab", full_name="A B", email="ab@x.com")

    assert response.status_code == 201
    body = response.json()
    assert body["statusCode"] == 201
    assert body["success"] is True
    user = body["data"]
    assert user["username"] == "ab"
    assert user["email"] == "ab@x.com"
    assert user["fullName"] == "A B"
    assert user["avatar"] in media_storage.uploaded
    assert "password" not in user
    assert "refreshToken" not in user
    assert PASSWORD not in response.text


def test_register_normalizes_username_and_email(api):
    response = api.register("MixedCase", email="MiXed@X.com")

    assert response.json()["data"]["username"] == "mixedcase"
    assert response.json()["data"]["email"] == "mixed@x.com"


def test_register_duplicate_is_conflict(api):
    assert api.register("ab").status_code == 201

    same_username = api.register("ab", email="other@x.com")
    same_email = api.register("other", email="ab@x.com")

    assert same_username.status_code == 409
    assert same_email.status_code == 409
    assert same_email.json()["code"] == "Conflict"


def test_register_race_removes_uploaded_media(api, media_storage):
    async def insert_competing_user():
        async with AsyncSessionLocal() as db:
            db.add(UserModel(
                username="ab",
                email="first@x.com",
                full_name="First",
                avatar="https://media.test/first.png",
                password="hash",
            ))
            await db.commit()

    def register_concurrently(local_path):
        # Only the first upload races with the other registration
        media_storage.before_upload = None
        run(insert_competing_user())

    media_storage.before_upload = register_concurrently

    response = api.client.post(
        "/api/v1/users/register",
        data={"fullName": "A B", "username": "ab", "email": "ab@x.com", "password": PASSWORD},
        files={
            "avatar": ("avatar.png", b"png-bytes", "image/png"),
            "coverImage": ("cover.png", b"png-bytes", "image/png"),
        }
    )

    assert response.status_code == 409
    assert len(media_storage.uploaded) == 2
    assert sorted(media_storage.deleted) == sorted(media_storage.uploaded)


def test_register_requires_fields_and_avatar(api):
    assert api.register("ab", full_name="  ").status_code == 400
    missing_avatar = api.register("ab", avatar=False)
    assert missing_avatar.status_code == 400
    assert missing_avatar.json()["message"] == "Avatar file is required"


def test_register_reports_media_host_failure(api, media_storage):
    media_storage.fail = True

    response = api.register("ab")

    assert response.status_code == 500
    assert response.json()["code"] == "Internal"


def test_login_sets_http_only_cookies(api, client):
    api.register("ab")

    response = client.post("/api/v1/users/login", json={"email": "ab@x.com", "password": PASSWORD})

    assert response.status_code == 200
    cookies = response.headers.get_list("set-cookie")
    assert any(cookie.startswith("accessToken=") and "HttpOnly" in cookie for cookie in cookies)
    assert any(cookie.startswith("refreshToken=") and "HttpOnly" in cookie for cookie in cookies)
    assert "password" not in response.json()["data"]["user"]

    # cookie authentication works without a header
    assert client.get("/api/v1/users/current-user").status_code == 200


def test_login_failures(api):
    api.register("ab")

    wrong_password = api.login("ab", password="nope")
    unknown = api.login("nobody")

    assert wrong_password.status_code == 401
    assert unknown.status_code == 404


def test_current_user_requires_token(client, alice):
    assert client.get("/api/v1/users/current-user").status_code == 401

    invalid = client.get("/api/v1/users/current-user", headers={"Authorization": "Bearer garbage"})
    assert invalid.status_code == 401
    assert invalid.json()["code"] == "TokenInvalid"

    response = client.get("/api/v1/users/current-user", headers=alice.headers)
    assert response.status_code == 200
    assert response.json()["data"]["id"] == alice.id


def test_refresh_token_rotation_rejects_reuse(client, alice):
    first = client.post("/api/v1/users/refresh-token", json={"refreshToken": alice.refresh_token})
    client.cookies.clear()

    assert first.status_code == 200
    rotated = first.json()["data"]
    assert rotated["refreshToken"] != alice.refresh_token

    reused = client.post("/api/v1/users/refresh-token", json={"refreshToken": alice.refresh_token})
    assert reused.status_code == 401
    assert reused.json()["code"] == "TokenExpiredOrReused"

    # the rotated token is now the active one
    second = client.post("/api/v1/users/refresh-token", json={"refreshToken": rotated["refreshToken"]})
    client.cookies.clear()
    assert second.status_code == 200


def test_refresh_invalidates_previous_access_token(client, alice):
    rotated = client.post("/api/v1/users/refresh-token", json={"refreshToken": alice.refresh_token}).json()["data"]
    client.cookies.clear()

    old = client.get("/api/v1/users/current-user", headers=alice.headers)
    new = client.get("/api/v1/users/current-user", headers={"Authorization": f"Bearer {rotated['accessToken']}"})

    assert old.status_code == 401
    assert new.status_code == 200


def test_refresh_with_invalid_token(client):
    assert client.post("/api/v1/users/refresh-token").status_code == 401

    response = client.post("/api/v1/users/refresh-token", json={"refreshToken": "garbage"})
    assert response.status_code == 401
    assert response.json()["code"] == "TokenInvalid"


def test_logout_invalidates_session(client, alice):
    response = client.post("/api/v1/users/logout", headers=alice.headers)
    assert response.status_code == 200

    assert client.get("/api/v1/users/current-user", headers=alice.headers).status_code == 401
    refresh = client.post("/api/v1/users/refresh-token", json={"refreshToken": alice.refresh_token})
    assert refresh.json()["code"] == "TokenExpiredOrReused"


def test_change_password(api, client, alice):
    wrong = client.post(
        "/api/v1/users/change-password",
        json={"oldPassword": "nope", "newPassword": "new-secret"},
        headers=alice.headers
    )
    assert wrong.status_code == 400

    changed = client.post(
        "/api/v1/users/change-password",
        json={"oldPassword": PASSWORD, "newPassword": "new-secret"},
        headers=alice.headers
    )
    assert changed.status_code == 200

    assert api.login("alice").status_code == 401
    assert api.login("alice", password="new-secret").status_code == 200


def test_update_account(client, alice, bob):
    updated = client.patch(
        "/api/v1/users/update-account",
        json={"fullName": "Alice Liddell", "email": "alice@wonder.land"},
        headers=alice.headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["fullName"] == "Alice Liddell"
    assert updated.json()["data"]["email"] == "alice@wonder.land"

    taken = client.patch("/api/v1/users/update-account", json={"email": "bob@x.com"}, headers=alice.headers)
    assert taken.status_code == 409

    empty = client.patch("/api/v1/users/update-account", json={}, headers=alice.headers)
    assert empty.status_code == 400


def test_update_avatar_replaces_old_file(client, alice, media_storage):
    old_avatar = client.get("/api/v1/users/current-user", headers=alice.headers).json()["data"]["avatar"]

    response = client.patch(
        "/api/v1/users/avatar",
        files={"avatar": ("new.png", b"new-png", "image/png")},
        headers=alice.headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["avatar"] != old_avatar
    assert old_avatar in media_storage.deleted


def test_update_cover_image(client, alice):
    missing = client.patch("/api/v1/users/cover-image", headers=alice.headers)
    assert missing.status_code == 400

    response = client.patch(
        "/api/v1/users/cover-image",
        files={"coverImage": ("cover.png", b"cover", "image/png")},
        headers=alice.headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["coverImage"].startswith("https://media.test/")


def test_channel_profile_counts(client, alice, bob):
    client.post(f"/api/v1/subscriptions/c/{alice.id}", headers=bob.headers)

    response = client.get("/api/v1/users/c/alice", headers=bob.headers)

    assert response.status_code == 200
    profile = response.json()["data"]
    assert profile["subscribersCount"] == 1
    assert profile["channelsSubscribedToCount"] == 0
    assert profile["isSubscribed"] is True
    assert "email" not in profile

    own = client.get("/api/v1/users/c/alice", headers=alice.headers).json()["data"]
    assert own["isSubscribed"] is False

    assert client.get("/api/v1/users/c/nobody", headers=alice.headers).status_code == 404


def test_watch_history_most_recent_first(api, client, alice, bob):
    first = api.publish_video(bob, title="first")
    second = api.publish_video(bob, title="second")

    client.get(f"/api/v1/video/{first['id']}", headers=alice.headers)
    client.get(f"/api/v1/video/{second['id']}", headers=alice.headers)
    client.get(f"/api/v1/video/{first['id']}", headers=alice.headers)

    history = client.get("/api/v1/users/history", headers=alice.headers).json()["data"]

    assert [video["id"] for video in history] == [first["id"], second["id"]]
    assert history[0]["owner"]["username"] == "bob"
