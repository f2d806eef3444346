"""Unit tests for the engagement transitions."""

from uuid import uuid4

import pytest

from debatify.domain.error import AlreadyVotedError, NotFoundError, ValidationError
from debatify.domain.model import engagement
from debatify.domain.value import (
    CommentId,
    ContentKind,
    Stance,
    UserId,
    VoteDirection,
    VoteRepeatPolicy,
)
from tests.conftest import make_item, make_user


def _actor() -> UserId:
    return UserId(uuid4())


class TestCastVote:
    """Tests for cast_vote."""

    def test_upvote_adds_voter_and_counts(self):
        """A fresh upvote adds the actor and bumps the counter."""
        # Arrange
        item = make_item(make_user())
        actor = _actor()

        # Act
        result = engagement.cast_vote(
            item, actor, VoteDirection.UP, VoteRepeatPolicy.TOGGLE
        )

        # Assert
        assert result.engaged is True
        assert result.item.upvoted_by == [actor]
        assert result.item.upvotes == 1
        assert result.item.downvotes == 0
        # The input is untouched
        assert item.upvotes == 0

    def test_repeat_upvote_toggles_off(self):
        """Repeating an upvote under TOGGLE removes it."""
        # Arrange
        item = make_item(make_user())
        actor = _actor()
        once = engagement.cast_vote(
            item, actor, VoteDirection.UP, VoteRepeatPolicy.TOGGLE
        ).item

        # Act
        twice = engagement.cast_vote(
            once, actor, VoteDirection.UP, VoteRepeatPolicy.TOGGLE
        )

        # Assert
        assert twice.engaged is False
        assert twice.item.upvoted_by == []
        assert twice.item.upvotes == 0

    def test_repeat_vote_rejected_under_reject_policy(self):
        """Repeating a vote under REJECT raises and leaves counts alone."""
        # Arrange
        item = make_item(make_user(), kind=ContentKind.BLOG)
        actor = _actor()
        once = engagement.cast_vote(
            item, actor, VoteDirection.DOWN, VoteRepeatPolicy.REJECT
        ).item

        # Act & Assert
        with pytest.raises(AlreadyVotedError, match="Already downvoted"):
            engagement.cast_vote(once, actor, VoteDirection.DOWN, VoteRepeatPolicy.REJECT)
        assert once.downvotes == 1

    def test_opposite_vote_switches_sides(self):
        """Downvoting after an upvote moves the actor to the other list."""
        # Arrange
        item = make_item(make_user())
        actor = _actor()
        upvoted = engagement.cast_vote(
            item, actor, VoteDirection.UP, VoteRepeatPolicy.REJECT
        ).item

        # Act
        result = engagement.cast_vote(
            upvoted, actor, VoteDirection.DOWN, VoteRepeatPolicy.REJECT
        )

        # Assert
        assert result.engaged is True
        assert result.item.upvoted_by == []
        assert result.item.upvotes == 0
        assert result.item.downvoted_by == [actor]
        assert result.item.downvotes == 1

    def test_counts_follow_lists_over_many_voters(self):
        """Counters equal list lengths after interleaved votes."""
        # Arrange
        item = make_item(make_user())
        voters = [_actor() for _ in range(5)]

        # Act
        for i, voter in enumerate(voters):
            direction = VoteDirection.UP if i % 2 == 0 else VoteDirection.DOWN
            item = engagement.cast_vote(
                item, voter, direction, VoteRepeatPolicy.TOGGLE
            ).item
        item = engagement.cast_vote(
            item, voters[0], VoteDirection.DOWN, VoteRepeatPolicy.TOGGLE
        ).item

        # Assert
        assert item.upvotes == len(item.upvoted_by) == 2
        assert item.downvotes == len(item.downvoted_by) == 3
        assert not set(item.upvoted_by) & set(item.downvoted_by)


class TestToggleBookmark:
    """Tests for toggle_bookmark."""

    def test_bookmark_then_unbookmark(self):
        """Two toggles return to the starting state."""
        # Arrange
        item = make_item(make_user())
        actor = _actor()

        # Act
        first = engagement.toggle_bookmark(item, actor)
        second = engagement.toggle_bookmark(first.item, actor)

        # Assert
        assert first.engaged is True
        assert first.item.bookmark_count == 1
        assert first.item.is_bookmarked_by(actor)
        assert second.engaged is False
        assert second.item.bookmark_count == 0
        assert second.item.bookmarked_by == []


class TestAppendComment:
    """Tests for append_comment."""

    def test_comment_appended_in_order(self):
        """Comments keep insertion order and get fresh ids."""
        # Arrange
        author = make_user()
        commenter = make_user("bob")
        item = make_item(author)

        # Act
        item, first = engagement.append_comment(
            item, commenter.id, commenter.username, "First!"
        )
        item, second = engagement.append_comment(
            item, commenter.id, commenter.username, "  Second  "
        )

        # Assert
        assert [c.id for c in item.comments] == [first.id, second.id]
        assert first.id != second.id
        assert second.text == "Second"
        assert second.likes == 0

    def test_debate_comment_requires_stance(self):
        """A debate comment without a stance is rejected."""
        # Arrange
        item = make_item(make_user(), kind=ContentKind.DEBATE)
        commenter = make_user("bob")

        # Act & Assert
        with pytest.raises(ValidationError, match="Stance"):
            engagement.append_comment(item, commenter.id, commenter.username, "Hmm")

    def test_debate_comment_with_stance(self):
        """A debate comment keeps its stance."""
        # Arrange
        item = make_item(make_user(), kind=ContentKind.DEBATE)
        commenter = make_user("bob")

        # Act
        item, comment = engagement.append_comment(
            item, commenter.id, commenter.username, "Agreed", Stance.WITH
        )

        # Assert
        assert comment.stance == Stance.WITH
        assert item.comments[-1].stance == Stance.WITH

    def test_stance_rejected_outside_debates(self):
        """Discussions and blogs take no stance."""
        # Arrange
        item = make_item(make_user(), kind=ContentKind.BLOG)
        commenter = make_user("bob")

        # Act & Assert
        with pytest.raises(ValidationError, match="no stance"):
            engagement.append_comment(
                item, commenter.id, commenter.username, "Nice", Stance.AGAINST
            )

    def test_blank_comment_rejected(self):
        """Whitespace-only text is rejected."""
        # Arrange
        item = make_item(make_user())
        commenter = make_user("bob")

        # Act & Assert
        with pytest.raises(ValidationError, match="required"):
            engagement.append_comment(item, commenter.id, commenter.username, "   ")


class TestToggleCommentLike:
    """Tests for toggle_comment_like."""

    def test_like_and_unlike_comment(self):
        """Liking twice removes the like again."""
        # Arrange
        commenter = make_user("bob")
        item, comment = engagement.append_comment(
            make_item(make_user()), commenter.id, commenter.username, "Hello"
        )
        liker = _actor()

        # Act
        liked, liked_comment = engagement.toggle_comment_like(item, comment.id, liker)
        unliked, unliked_comment = engagement.toggle_comment_like(
            liked.item, comment.id, liker
        )

        # Assert
        assert liked.engaged is True
        assert liked_comment.likes == 1
        assert liked_comment.liked_by == [liker]
        assert liked.item.find_comment(comment.id).likes == 1
        assert unliked.engaged is False
        assert unliked_comment.likes == 0
        assert unliked.item.find_comment(comment.id).liked_by == []

    def test_unknown_comment_raises(self):
        """Liking a comment that does not exist raises NotFoundError."""
        # Arrange
        item = make_item(make_user())

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment"):
            engagement.toggle_comment_like(item, CommentId(uuid4()), _actor())
