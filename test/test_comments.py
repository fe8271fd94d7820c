def test_add_and_list_comments(api, client, alice, bob):
    video = api.publish_video(alice)
    other = api.publish_video(alice, title="other")
    api.comment(bob, video["id"], "first")
    api.comment(alice, video["id"], "second")
    api.comment(bob, other["id"], "elsewhere")

    response = client.get(f"/api/v1/comments?videoId={video['id']}&sortType=asc", headers=alice.headers)

    page = response.json()["data"]
    assert page["totalItems"] == 2
    assert [comment["content"] for comment in page["items"]] == ["first", "second"]
    assert page["items"][0]["owner"]["username"] == "bob"


def test_comment_on_missing_video(client, alice):
    response = client.post(f"/api/v1/comments/{'0' * 32}", json={"content": "hi"}, headers=alice.headers)

    assert response.status_code == 404


def test_comment_requires_content(api, client, alice):
    video = api.publish_video(alice)

    response = client.post(f"/api/v1/comments/{video['id']}", json={}, headers=alice.headers)

    assert response.status_code == 400


def test_only_owner_can_edit_comment(api, client, alice, bob):
    video = api.publish_video(alice)
    comment = api.comment(bob, video["id"])

    forbidden = client.patch(f"/api/v1/comments/c/{comment['id']}", json={"content": "x"}, headers=alice.headers)
    updated = client.patch(f"/api/v1/comments/c/{comment['id']}", json={"content": "edited"}, headers=bob.headers)

    assert forbidden.status_code == 403
    assert updated.status_code == 200
    assert updated.json()["data"]["content"] == "edited"


def test_delete_comment(api, client, alice, bob):
    video = api.publish_video(alice)
    comment = api.comment(bob, video["id"])
    client.post(f"/api/v1/likes/toggle/c/{comment['id']}", headers=alice.headers)

    assert client.delete(f"/api/v1/comments/c/{comment['id']}", headers=alice.headers).status_code == 403
    assert client.delete(f"/api/v1/comments/c/{comment['id']}", headers=bob.headers).status_code == 200
    assert client.get(f"/api/v1/comments?videoId={video['id']}", headers=bob.headers).json()["data"]["totalItems"] == 0


def test_non_owner_is_forbidden_before_body_is_validated(api, client, alice, bob):
    video = api.publish_video(alice)
    comment = api.comment(alice, video["id"])
    path = f"/api/v1/comments/c/{comment['id']}"

    assert client.patch(path, headers=bob.headers).status_code == 403
    assert client.patch(path, json=["not", "an", "object"], headers=bob.headers).status_code == 403
    assert client.patch(path, json=["not", "an", "object"], headers=alice.headers).status_code == 400
