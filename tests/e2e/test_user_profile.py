"""End-to-end tests for profiles, the follow graph and support requests."""

import pytest

from debatify.adapter.mailer import MockEmailSender
from debatify.adapter.storage import MockBlobStorage
from tests.e2e.accounts import bearer, register
from tests.harness import create_client_fixture

api = create_client_fixture()


class TestFollow:
    """Following and unfollowing over HTTP."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, api):
        """Both sides of the edge change and both actions notify."""
        # Arrange
        client, container = api
        alice, alice_id = await register(client, container, "alice")
        bob, bob_id = await register(client, container, "bob")

        # Act
        followed = await client.post("/users/bob/follow", headers=bearer(alice))
        profile = await client.get("/users/bob")
        followings = await client.get("/users/alice/followings", headers=bearer(bob))
        unfollowed = await client.post("/users/bob/unfollow", headers=bearer(alice))
        inbox = await client.get("/notifications", headers=bearer(bob))

        # Assert
        assert followed.json() == {"message": "Followed successfully", "followerCount": 1}
        assert [u["id"] for u in profile.json()["followers"]] == [alice_id]
        assert [u["id"] for u in followings.json()["users"]] == [bob_id]
        assert unfollowed.json() == {
            "message": "Unfollowed successfully",
            "followerCount": 0,
        }
        messages = {n["message"] for n in inbox.json()["notifications"]}
        assert messages == {"alice followed you", "alice unfollowed you"}

    @pytest.mark.asyncio
    async def test_follow_twice_rejected(self, api):
        client, container = api
        alice, _ = await register(client, container, "alice")
        await register(client, container, "bob")
        await client.post("/users/bob/follow", headers=bearer(alice))

        response = await client.post("/users/bob/follow", headers=bearer(alice))

        assert response.status_code == 400
        assert response.json() == {"message": "Already following"}

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, api):
        client, container = api
        alice, _ = await register(client, container, "alice")

        response = await client.post("/users/alice/follow", headers=bearer(alice))

        assert response.status_code == 400
        assert response.json() == {"message": "Cannot follow yourself"}

    @pytest.mark.asyncio
    async def test_follower_list_requires_token(self, api):
        client, container = api
        await register(client, container, "alice")

        response = await client.get("/users/alice/followers")

        assert response.status_code == 401


class TestProfile:
    """Profile reads and updates."""

    @pytest.mark.asyncio
    async def test_unknown_user(self, api):
        client, _ = api

        response = await client.get("/users/nobody")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, api):
        client, container = api
        await register(client, container, "AliceW")
        await register(client, container, "bob")

        response = await client.get("/users/search", params={"query": "alice"})

        assert [u["username"] for u in response.json()["users"]] == ["AliceW"]

    @pytest.mark.asyncio
    async def test_update_bio(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")

        response = await client.put(
            "/users/me/bio", json={"bio": "Debates for fun"}, headers=bearer(token)
        )
        me = await client.get("/users/me", headers=bearer(token))

        assert response.json() == {"message": "Bio updated", "bio": "Debates for fun"}
        assert me.json()["bio"] == "Debates for fun"

    @pytest.mark.asyncio
    async def test_upload_profile_picture(self, api):
        # Arrange
        client, container = api
        storage = await container.get(MockBlobStorage)
        token, _ = await register(client, container, "alice")

        # Act
        response = await client.put(
            "/users/me/profile-picture",
            files={"profilePicture": ("me.png", b"\x89PNG fake", "image/png")},
            headers=bearer(token),
        )

        # Assert
        assert response.status_code == 200
        url = response.json()["profilePicture"]
        assert url.startswith("https://blobs.test/")
        assert url.endswith("/me.png")
        assert storage.uploads[url] == b"\x89PNG fake"
        profile = await client.get("/users/alice")
        assert profile.json()["profilePicture"] == url

    @pytest.mark.asyncio
    async def test_upload_rejects_non_image(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")

        response = await client.put(
            "/users/me/profile-picture",
            files={"profilePicture": ("notes.txt", b"hello", "text/plain")},
            headers=bearer(token),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Unsupported file type: text/plain"}

    @pytest.mark.asyncio
    async def test_user_content_listing(self, api):
        client, container = api
        alice, _ = await register(client, container, "alice")
        bob, _ = await register(client, container, "bob")
        for token, title in ((alice, "Mine"), (bob, "Theirs")):
            await client.post(
                "/content/blog",
                data={"title": title, "body": "..."},
                headers=bearer(token),
            )

        response = await client.get("/users/alice/content/blog")

        assert [item["title"] for item in response.json()["items"]] == ["Mine"]


class TestSupportAndHealth:
    """Support requests and the health check."""

    @pytest.mark.asyncio
    async def test_support_request_forwarded(self, api):
        # Arrange
        client, container = api
        outbox = await container.get(MockEmailSender)

        # Act
        response = await client.post(
            "/support",
            json={
                "name": "Alice",
                "email": "alice@example.com",
                "message": "I cannot find the dark mode toggle.",
            },
        )

        # Assert
        assert response.json() == {"message": "Support request sent successfully"}
        forwarded = outbox.last_to("support@debatify.com")
        assert forwarded is not None
        assert forwarded.subject == "Support request from Alice"
        assert "dark mode" in forwarded.body

    @pytest.mark.asyncio
    async def test_health(self, api):
        client, _ = api

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"
