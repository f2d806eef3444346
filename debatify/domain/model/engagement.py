"""Engagement transitions.

Pure functions over any aggregate exposing the engagement capability set
(membership lists, counters, comments). Each returns a new instance;
persisting it is the caller's job. Counters are always recomputed from
their membership list, so a repeated or interleaved transition can never
drift them. Views are counted in place by the repository.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, Optional, Protocol, TypeVar
from uuid import uuid4

from debatify.domain.error import AlreadyVotedError, NotFoundError, ValidationError
from debatify.domain.model.common import utcnow
from debatify.domain.model.content import MAX_COMMENT_LENGTH, Comment
from debatify.domain.value import (
    CommentId,
    ContentKind,
    Stance,
    UserId,
    Username,
    VoteDirection,
    VoteRepeatPolicy,
)


class Engageable(Protocol):
    """Capabilities the engagement transitions rely on."""

    @property
    def kind(self) -> ContentKind: ...

    @property
    def upvoted_by(self) -> list[UserId]: ...

    @property
    def downvoted_by(self) -> list[UserId]: ...

    @property
    def bookmarked_by(self) -> list[UserId]: ...

    @property
    def comments(self) -> list[Comment]: ...

    def model_copy(self, *, update: Optional[dict[str, Any]] = None, deep: bool = False) -> Any: ...


E = TypeVar("E", bound=Engageable)


@dataclass(frozen=True)
class Transition(Generic[E]):
    """Result of a toggle-style transition.

    ``engaged`` is True when the actor holds the engagement afterwards
    (a new vote, bookmark or like), False when it was taken back.
    """

    item: E
    engaged: bool


# direction -> (own list, own counter, opposing list, opposing counter)
_VOTE_FIELDS = {
    VoteDirection.UP: ("upvoted_by", "upvotes", "downvoted_by", "downvotes"),
    VoteDirection.DOWN: ("downvoted_by", "downvotes", "upvoted_by", "upvotes"),
}


def _toggle(members: list[UserId], actor_id: UserId) -> tuple[list[UserId], bool]:
    if actor_id in members:
        return [m for m in members if m != actor_id], False
    return [*members, actor_id], True


def cast_vote(
    item: E,
    actor_id: UserId,
    direction: VoteDirection,
    policy: VoteRepeatPolicy,
) -> Transition[E]:
    """Apply an upvote or downvote.

    A repeated vote is taken back under TOGGLE and rejected under REJECT.
    A fresh vote first withdraws the actor's opposing vote, if any.

    Raises:
        AlreadyVotedError: Repeated vote under the REJECT policy
    """
    own_list, own_count, other_list, other_count = _VOTE_FIELDS[direction]
    own = list(getattr(item, own_list))

    if actor_id in own:
        if policy is VoteRepeatPolicy.REJECT:
            raise AlreadyVotedError(direction.value)
        own.remove(actor_id)
        updated = item.model_copy(update={own_list: own, own_count: len(own)})
        return Transition(item=updated, engaged=False)

    other = [m for m in getattr(item, other_list) if m != actor_id]
    own.append(actor_id)
    updated = item.model_copy(
        update={
            own_list: own,
            own_count: len(own),
            other_list: other,
            other_count: len(other),
        }
    )
    return Transition(item=updated, engaged=True)


def toggle_bookmark(item: E, actor_id: UserId) -> Transition[E]:
    """Add or remove the actor's bookmark."""
    members, engaged = _toggle(list(item.bookmarked_by), actor_id)
    updated = item.model_copy(
        update={"bookmarked_by": members, "bookmark_count": len(members)}
    )
    return Transition(item=updated, engaged=engaged)


def append_comment(
    item: E,
    author_id: UserId,
    author_username: Username,
    text: str,
    stance: Optional[Stance] = None,
    now: Optional[datetime] = None,
) -> tuple[E, Comment]:
    """Append a new comment with a fresh id and timestamp.

    Raises:
        ValidationError: Missing stance on a debate, a stance anywhere else,
            or empty text
    """
    if item.kind.requires_stance and stance is None:
        raise ValidationError("Stance must be 'with' or 'against' on debates")
    if not item.kind.requires_stance and stance is not None:
        raise ValidationError(f"Comments on a {item.kind.label} take no stance")
    text = text.strip()
    if not text:
        raise ValidationError("Comment text is required")
    if len(text) > MAX_COMMENT_LENGTH:
        raise ValidationError(f"Comment text exceeds {MAX_COMMENT_LENGTH} characters")

    comment = Comment(
        id=CommentId(uuid4()),
        author_id=author_id,
        author_username=author_username,
        text=text,
        stance=stance,
        created_at=now or utcnow(),
    )
    updated = item.model_copy(update={"comments": [*item.comments, comment]})
    return updated, comment


def toggle_comment_like(
    item: E, comment_id: CommentId, actor_id: UserId
) -> tuple[Transition[E], Comment]:
    """Like or unlike one comment.

    Returns the transition and the comment as it is afterwards.

    Raises:
        NotFoundError: No comment with this id on the item
    """
    comments = list(item.comments)
    index = next((i for i, c in enumerate(comments) if c.id == comment_id), None)
    if index is None:
        raise NotFoundError("Comment", str(comment_id))

    comment = comments[index]
    liked_by, engaged = _toggle(list(comment.liked_by), actor_id)
    comment = comment.model_copy(update={"liked_by": liked_by, "likes": len(liked_by)})
    comments[index] = comment

    updated = item.model_copy(update={"comments": comments})
    return Transition(item=updated, engaged=engaged), comment
