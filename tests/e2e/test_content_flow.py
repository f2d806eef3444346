"""End-to-end tests for content, engagement and notifications."""

import pytest

from debatify.adapter.storage import MockBlobStorage
from tests.e2e.accounts import bearer, register
from tests.harness import create_client_fixture

api = create_client_fixture()


async def _create(client, token, kind="debate", **fields):
    body = {"title": "Tabs or spaces", "body": "Settle it.", "category": "tech"}
    body.update(fields)
    if kind == "blog":
        # Blogs are posted as forms
        form = {
            k: str(v).lower() if isinstance(v, bool) else v
            for k, v in body.items()
            if v is not None
        }
        response = await client.post("/content/blog", data=form, headers=bearer(token))
    else:
        response = await client.post(
            f"/content/{kind}", json=body, headers=bearer(token)
        )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAndRead:
    """Creating, listing and reading items."""

    @pytest.mark.asyncio
    async def test_create_requires_token(self, api):
        client, _ = api

        response = await client.post(
            "/content/discussion", json={"title": "Hi", "body": "There"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "No token, authorization denied"}

    @pytest.mark.asyncio
    async def test_create_and_read_camel_case(self, api):
        # Arrange
        client, container = api
        token, user_id = await register(client, container, "alice")

        # Act
        created = await _create(client, token)
        response = await client.get(f"/content/debate/{created['id']}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["authorId"] == user_id
        assert data["authorUsername"] == "alice"
        assert data["views"] == 1
        assert data["viewsFormatted"] == "1"
        assert data["bookmarkCount"] == 0
        assert "passcode" not in data

    @pytest.mark.asyncio
    async def test_poll_does_not_count_view(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")
        created = await _create(client, token, kind="discussion")

        await client.get(f"/content/discussion/{created['id']}")
        response = await client.get(
            f"/content/discussion/{created['id']}", params={"poll": "true"}
        )

        assert response.json()["views"] == 1

    @pytest.mark.asyncio
    async def test_debate_requires_category(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")

        response = await client.post(
            "/content/debate",
            json={"title": "No category", "body": "..."},
            headers=bearer(token),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_wrong_kind_is_not_found(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")
        created = await _create(client, token, kind="blog", category=None)

        response = await client.get(f"/content/debate/{created['id']}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_private_item_needs_passcode(self, api):
        """Listings show a private item without its body; reading needs the passcode."""
        # Arrange
        client, container = api
        token, _ = await register(client, container, "alice")
        created = await _create(
            client,
            token,
            kind="discussion",
            body="Secret plans",
            isPrivate=True,
            passcode="hunter2",
        )

        # Act
        listing = await client.get("/content/discussion")
        denied = await client.get(f"/content/discussion/{created['id']}")
        wrong = await client.get(
            f"/content/discussion/{created['id']}", params={"passcode": "nope"}
        )
        allowed = await client.get(
            f"/content/discussion/{created['id']}", params={"passcode": "hunter2"}
        )

        # Assert
        [listed] = listing.json()["items"]
        assert listed["isPrivate"] is True
        assert listed["body"] == ""
        assert denied.status_code == 401
        assert wrong.status_code == 401
        assert allowed.status_code == 200
        assert allowed.json()["body"] == "Secret plans"
        # Only the successful read counted
        assert allowed.json()["views"] == 1


class TestBlogAttachments:
    """Blog files are stored by the server, which records their URLs."""

    @pytest.mark.asyncio
    async def test_files_stored_and_urls_recorded(self, api):
        # Arrange
        client, container = api
        storage = await container.get(MockBlobStorage)
        token, _ = await register(client, container, "alice")

        # Act
        response = await client.post(
            "/content/blog",
            data={"title": "Field notes", "body": "See attached.", "isPrivate": "false"},
            files=[
                ("files", ("photo.png", b"\x89PNG fake", "image/png")),
                ("files", ("paper.pdf", b"%PDF-1.7 fake", "application/pdf")),
            ],
            headers=bearer(token),
        )

        # Assert
        assert response.status_code == 201, response.text
        file_urls = response.json()["fileUrls"]
        assert len(file_urls) == 2
        assert file_urls[0].endswith("/photo.png")
        assert file_urls[1].endswith("/paper.pdf")
        assert [storage.uploads[url] for url in file_urls] == [
            b"\x89PNG fake",
            b"%PDF-1.7 fake",
        ]

    @pytest.mark.asyncio
    async def test_client_urls_are_ignored(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")

        blog = await _create(
            client, token, kind="blog", fileUrls="https://evil.example/x.png"
        )

        assert blog["fileUrls"] == []

    @pytest.mark.asyncio
    async def test_disallowed_type_rejected_before_upload(self, api):
        # Arrange
        client, container = api
        storage = await container.get(MockBlobStorage)
        token, _ = await register(client, container, "alice")

        # Act
        response = await client.post(
            "/content/blog",
            data={"title": "Notes", "body": "..."},
            files=[
                ("files", ("ok.png", b"\x89PNG fake", "image/png")),
                ("files", ("run.sh", b"rm -rf /", "text/x-shellscript")),
            ],
            headers=bearer(token),
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"message": "Unsupported file type: text/x-shellscript"}
        assert storage.uploads == {}

    @pytest.mark.asyncio
    async def test_too_many_files_rejected(self, api):
        client, container = api
        token, _ = await register(client, container, "alice")

        response = await client.post(
            "/content/blog",
            data={"title": "Album", "body": "..."},
            files=[
                ("files", (f"{i}.png", b"\x89PNG fake", "image/png"))
                for i in range(11)
            ],
            headers=bearer(token),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "At most 10 files can be attached"}


class TestEngagement:
    """Votes, comments, likes and bookmarks over HTTP."""

    @pytest.mark.asyncio
    async def test_blog_repeat_vote_rejected(self, api):
        # Arrange
        client, container = api
        author, _ = await register(client, container, "alice")
        voter, _ = await register(client, container, "bob")
        blog = await _create(client, author, kind="blog", category=None)
        url = f"/content/blog/{blog['id']}/upvote"

        # Act
        first = await client.post(url, headers=bearer(voter))
        second = await client.post(url, headers=bearer(voter))

        # Assert
        assert first.json() == {"upvotes": 1, "downvotes": 0}
        assert second.status_code == 400
        assert second.json() == {"message": "Already upvoted"}

    @pytest.mark.asyncio
    async def test_debate_vote_toggles_and_switches(self, api):
        client, container = api
        author, _ = await register(client, container, "alice")
        voter, _ = await register(client, container, "bob")
        debate = await _create(client, author)
        base = f"/content/debate/{debate['id']}"

        up = await client.post(f"{base}/upvote", headers=bearer(voter))
        down = await client.post(f"{base}/downvote", headers=bearer(voter))
        off = await client.post(f"{base}/downvote", headers=bearer(voter))

        assert up.json() == {"upvotes": 1, "downvotes": 0}
        assert down.json() == {"upvotes": 0, "downvotes": 1}
        assert off.json() == {"upvotes": 0, "downvotes": 0}

    @pytest.mark.asyncio
    async def test_comments_and_likes(self, api):
        # Arrange
        client, container = api
        author, author_id = await register(client, container, "alice")
        commenter, _ = await register(client, container, "bob")
        debate = await _create(client, author)
        base = f"/content/debate/{debate['id']}"

        # Act
        missing_stance = await client.post(
            f"{base}/comment", json={"text": "Tabs"}, headers=bearer(commenter)
        )
        commented = await client.post(
            f"{base}/comment",
            json={"text": "Spaces, always", "stance": "against"},
            headers=bearer(commenter),
        )
        comment = commented.json()["comments"][0]
        liked = await client.post(
            f"{base}/comment/{comment['id']}/like", headers=bearer(author)
        )

        # Assert
        assert missing_stance.status_code == 400
        assert commented.status_code == 201
        assert comment["authorUsername"] == "bob"
        assert comment["stance"] == "against"
        assert liked.json() == {
            "likes": 1,
            "likedBy": [author_id],
            "isLiked": True,
        }

    @pytest.mark.asyncio
    async def test_bookmarks(self, api):
        # Arrange
        client, container = api
        author, _ = await register(client, container, "alice")
        reader, _ = await register(client, container, "bob")
        kept = await _create(client, author, title="Keep me")
        await _create(client, author, title="Skip me")

        # Act
        response = await client.post(
            f"/content/debate/{kept['id']}/bookmark", headers=bearer(reader)
        )
        bookmarks = await client.get("/bookmarks", headers=bearer(reader))

        # Assert
        assert response.json() == {"bookmarkCount": 1, "isBookmarked": True}
        items = bookmarks.json()["items"]
        assert [item["title"] for item in items] == ["Keep me"]
        assert items[0]["isBookmarked"] is True


class TestNotifications:
    """Engagement produces notifications for the author."""

    @pytest.mark.asyncio
    async def test_vote_notifies_and_mark_read(self, api):
        # Arrange
        client, container = api
        author, _ = await register(client, container, "alice")
        voter, voter_id = await register(client, container, "bob")
        debate = await _create(client, author, title="Tabs")
        await client.post(
            f"/content/debate/{debate['id']}/upvote", headers=bearer(voter)
        )

        # Act
        inbox = await client.get("/notifications", headers=bearer(author))
        marked = await client.put("/notifications/mark-read", headers=bearer(author))
        after = await client.get("/notifications", headers=bearer(author))

        # Assert
        [notification] = inbox.json()["notifications"]
        assert notification["type"] == "upvote"
        assert notification["actorId"] == voter_id
        assert notification["relatedId"] == debate["id"]
        assert notification["message"] == 'bob upvoted your debate "Tabs"'
        assert notification["read"] is False
        assert marked.json() == {
            "message": "All notifications marked as read",
            "updated": 1,
        }
        assert after.json()["notifications"][0]["read"] is True

    @pytest.mark.asyncio
    async def test_notifications_require_token(self, api):
        client, _ = api

        response = await client.get("/notifications")

        assert response.status_code == 401


class TestDelete:
    """Deleting items."""

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, api):
        # Arrange
        client, container = api
        author, _ = await register(client, container, "alice")
        other, _ = await register(client, container, "bob")
        created = await _create(client, author, kind="discussion")
        url = f"/content/discussion/{created['id']}"

        # Act
        forbidden = await client.delete(url, headers=bearer(other))
        deleted = await client.delete(url, headers=bearer(author))
        gone = await client.get(url)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.json() == {"message": "Discussion deleted successfully"}
        assert gone.status_code == 404
