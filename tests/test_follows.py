from __future__ import annotations


def test_follow_user_creates_single_edge(api_client, make_user, auth_headers, count_rows) -> None:
    from app.models import UserFollowModel

    u1 = make_user(display_name="Sommelier One")
    u2 = make_user()

    resp = api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=auth_headers(u2))
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert "followed successfully" in body["message"]
    assert "Sommelier One" in body["message"]

    assert (
        count_rows(
            UserFollowModel,
            UserFollowModel.follower_id == u2.user_id,
            UserFollowModel.following_id == u1.user_id,
        )
        == 1
    )


def test_follow_message_falls_back_to_username(api_client, make_user, auth_headers) -> None:
    u1 = make_user(username="plain_user")
    u2 = make_user()

    resp = api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=auth_headers(u2))
    assert resp.status_code == 200
    assert "plain_user" in resp.json()["message"]


def test_follow_yourself_is_rejected(api_client, make_user, auth_headers, count_rows) -> None:
    from app.models import UserFollowModel

    u1 = make_user()

    resp = api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=auth_headers(u1))
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "Cannot follow yourself" in body["message"]
    assert count_rows(UserFollowModel) == 0


def test_token_for_unknown_user_is_rejected(api_client, auth_headers) -> None:
    from types import SimpleNamespace

    ghost = SimpleNamespace(user_id=424242)
    resp = api_client.post("/api/v1/social/follow/424242", headers=auth_headers(ghost))
    assert resp.status_code == 401


def test_follow_missing_user_is_not_found(api_client, make_user, auth_headers) -> None:
    u1 = make_user()

    resp = api_client.post("/api/v1/social/follow/999999", headers=auth_headers(u1))
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert "User not found" in body["message"]


def test_follow_twice_is_conflict(api_client, make_user, auth_headers, count_rows) -> None:
    from app.models import UserFollowModel

    u1, u2 = make_user(), make_user()
    headers = auth_headers(u2)

    first = api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert first.status_code == 200

    second = api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert second.status_code == 409
    assert second.json()["success"] is False
    assert "Already following this user" in second.json()["message"]

    assert count_rows(UserFollowModel, UserFollowModel.follower_id == u2.user_id) == 1


def test_follow_requires_authentication(api_client, make_user) -> None:
    u1 = make_user()

    resp = api_client.post(f"/api/v1/social/follow/{u1.user_id}")
    assert resp.status_code == 401
    assert resp.json()["success"] is False


def test_invalid_token_is_rejected(api_client, make_user) -> None:
    u1 = make_user()

    resp = api_client.post(
        f"/api/v1/social/follow/{u1.user_id}", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert resp.status_code == 401
    assert resp.json()["success"] is False


def test_unfollow_removes_edge(api_client, make_user, auth_headers, count_rows) -> None:
    from app.models import UserFollowModel

    u1, u2 = make_user(), make_user()
    headers = auth_headers(u2)
    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)

    resp = api_client.delete(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert "User unfollowed successfully" in body["message"]
    assert count_rows(UserFollowModel) == 0


def test_unfollow_without_follow_is_conflict(api_client, make_user, auth_headers) -> None:
    u2, u3 = make_user(), make_user()

    resp = api_client.delete(f"/api/v1/social/follow/{u3.user_id}", headers=auth_headers(u2))
    assert resp.status_code == 409
    assert "Not following this user" in resp.json()["message"]


def test_second_unfollow_is_an_error(api_client, make_user, auth_headers) -> None:
    u1, u2 = make_user(), make_user()
    headers = auth_headers(u2)
    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)

    assert api_client.delete(f"/api/v1/social/follow/{u1.user_id}", headers=headers).status_code == 200
    again = api_client.delete(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert again.status_code == 409
    assert "Not following" in again.json()["message"]


def test_check_follow_tracks_edge(api_client, make_user, auth_headers) -> None:
    u1, u2 = make_user(), make_user()
    headers = auth_headers(u2)
    url = f"/api/v1/social/follow/check/{u1.user_id}"

    assert api_client.get(url, headers=headers).json() == {"success": True, "following": False}

    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert api_client.get(url, headers=headers).json()["following"] is True

    api_client.delete(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert api_client.get(url, headers=headers).json()["following"] is False


def test_check_follow_requires_authentication(api_client, make_user) -> None:
    u1 = make_user()

    resp = api_client.get(f"/api/v1/social/follow/check/{u1.user_id}")
    assert resp.status_code == 401


def test_followers_list(api_client, make_user, auth_headers) -> None:
    u1, u2 = make_user(), make_user()
    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=auth_headers(u2))

    resp = api_client.get(f"/api/v1/social/followers/{u1.user_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [item["user_id"] for item in body["items"]] == [u2.user_id]
    assert body["items"][0]["username"] == u2.username
    assert body["pagination"] == {"page": 1, "limit": 20, "total": 1, "pages": 1}


def test_followers_list_empty(api_client, make_user) -> None:
    u3 = make_user()

    resp = api_client.get(f"/api/v1/social/followers/{u3.user_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["items"] == []
    assert body["pagination"]["total"] == 0


def test_followers_of_missing_user_is_not_found(api_client) -> None:
    resp = api_client.get("/api/v1/social/followers/999999")
    assert resp.status_code == 404
    assert "User not found" in resp.json()["message"]


def test_following_list(api_client, make_user, auth_headers) -> None:
    u1, u2, u3 = make_user(), make_user(), make_user()
    headers = auth_headers(u2)
    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    api_client.post(f"/api/v1/social/follow/{u3.user_id}", headers=headers)

    resp = api_client.get(f"/api/v1/social/following/{u2.user_id}")
    assert resp.status_code == 200
    ids = {item["user_id"] for item in resp.json()["items"]}
    assert ids == {u1.user_id, u3.user_id}

    empty = api_client.get(f"/api/v1/social/following/{u3.user_id}")
    assert empty.json()["items"] == []


def test_follow_lists_mark_users_the_viewer_follows(api_client, make_user, auth_headers) -> None:
    target, fan_a, fan_b, viewer = make_user(), make_user(), make_user(), make_user()
    api_client.post(f"/api/v1/social/follow/{target.user_id}", headers=auth_headers(fan_a))
    api_client.post(f"/api/v1/social/follow/{target.user_id}", headers=auth_headers(fan_b))
    api_client.post(f"/api/v1/social/follow/{fan_a.user_id}", headers=auth_headers(viewer))

    resp = api_client.get(
        f"/api/v1/social/followers/{target.user_id}", headers=auth_headers(viewer)
    )
    flags = {item["user_id"]: item["is_following"] for item in resp.json()["items"]}
    assert flags == {fan_a.user_id: True, fan_b.user_id: False}

    anonymous = api_client.get(f"/api/v1/social/followers/{target.user_id}")
    assert all(item["is_following"] is False for item in anonymous.json()["items"])


def test_followers_pagination(api_client, make_user, auth_headers) -> None:
    target = make_user()
    for _ in range(5):
        fan = make_user()
        api_client.post(f"/api/v1/social/follow/{target.user_id}", headers=auth_headers(fan))

    page1 = api_client.get(f"/api/v1/social/followers/{target.user_id}?page=1&limit=2").json()
    page3 = api_client.get(f"/api/v1/social/followers/{target.user_id}?page=3&limit=2").json()

    assert len(page1["items"]) == 2
    assert len(page3["items"]) == 1
    assert page1["pagination"] == {"page": 1, "limit": 2, "total": 5, "pages": 3}

    seen = {item["user_id"] for item in page1["items"]} | {item["user_id"] for item in page3["items"]}
    assert len(seen) == 3


def test_pagination_limits_are_validated(api_client, make_user) -> None:
    u1 = make_user()

    assert api_client.get(f"/api/v1/social/followers/{u1.user_id}?limit=0").status_code == 400
    assert api_client.get(f"/api/v1/social/followers/{u1.user_id}?limit=101").status_code == 400
    assert api_client.get(f"/api/v1/social/followers/{u1.user_id}?page=0").status_code == 400


def test_follow_stats(api_client, make_user, auth_headers) -> None:
    u1, u2, u3 = make_user(), make_user(), make_user()
    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=auth_headers(u2))
    api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=auth_headers(u3))
    api_client.post(f"/api/v1/social/follow/{u2.user_id}", headers=auth_headers(u1))

    stats = api_client.get(f"/api/v1/social/follow/stats/{u1.user_id}").json()["stats"]
    assert stats == {"user_id": u1.user_id, "followers_count": 2, "following_count": 1}


def test_follow_unfollow_scenario(api_client, make_user, auth_headers, count_rows) -> None:
    from app.models import UserFollowModel

    u1, u2 = make_user(), make_user()
    headers = auth_headers(u2)

    follow = api_client.post(f"/api/v1/social/follow/{u1.user_id}", headers=headers)
    assert "followed successfully" in follow.json()["message"]
    assert count_rows(UserFollowModel) == 1

    followers = api_client.get(f"/api/v1/social/followers/{u1.user_id}").json()["items"]
    assert [f["user_id"] for f in followers] == [u2.user_id]

    assert api_client.delete(f"/api/v1/social/follow/{u1.user_id}", headers=headers).status_code == 200
    assert count_rows(UserFollowModel) == 0


def test_followers_newest_edge_first(api_client, make_user, auth_headers) -> None:
    target = make_user()
    fan_low, fan_high = make_user(), make_user()

    # the higher id follows first, so id order and insertion order disagree
    api_client.post(f"/api/v1/social/follow/{target.user_id}", headers=auth_headers(fan_high))
    api_client.post(f"/api/v1/social/follow/{target.user_id}", headers=auth_headers(fan_low))

    items = api_client.get(f"/api/v1/social/followers/{target.user_id}").json()["items"]
    assert [item["user_id"] for item in items] == [fan_low.user_id, fan_high.user_id]

    first_page = api_client.get(f"/api/v1/social/followers/{target.user_id}?limit=1").json()
    second_page = api_client.get(f"/api/v1/social/followers/{target.user_id}?page=2&limit=1").json()
    assert first_page["items"][0]["user_id"] == fan_low.user_id
    assert second_page["items"][0]["user_id"] == fan_high.user_id


def test_following_newest_edge_first(api_client, make_user, auth_headers) -> None:
    fan = make_user()
    star_low, star_high = make_user(), make_user()
    headers = auth_headers(fan)

    api_client.post(f"/api/v1/social/follow/{star_high.user_id}", headers=headers)
    api_client.post(f"/api/v1/social/follow/{star_low.user_id}", headers=headers)

    items = api_client.get(f"/api/v1/social/following/{fan.user_id}").json()["items"]
    assert [item["user_id"] for item in items] == [star_low.user_id, star_high.user_id]
