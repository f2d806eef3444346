"""Domain layer errors.

Each error maps to one HTTP status in the interface layer; see
``debatify.interface.api.errors``.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input does not satisfy a domain rule (bad shape, malformed id)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Operation conflicts with the current state."""

    pass


class AlreadyVotedError(ConflictError):
    """Repeated vote where the vote policy does not toggle."""

    def __init__(self, direction: str):
        super().__init__(f"Already {direction}voted")


class AlreadyFollowingError(ConflictError):
    def __init__(self) -> None:
        super().__init__("Already following")


class NotFollowingError(ConflictError):
    def __init__(self) -> None:
        super().__init__("Not following this user")


class SelfReferenceError(ConflictError):
    """A user tried to follow or unfollow itself."""

    def __init__(self, action: str = "follow"):
        super().__init__(f"Cannot {action} yourself")


class StaleContentError(DomainError):
    """Content kept changing underneath a compare-and-set write."""

    def __init__(self, content_id: str):
        self.content_id = content_id
        super().__init__(f"Content {content_id} was modified concurrently, retry")


class UnauthenticatedError(DomainError):
    """No usable credential was presented."""

    pass


class InvalidCredentialError(DomainError):
    """Credential was presented but failed verification."""

    pass


class AccessDeniedError(DomainError):
    """Shared-secret (passcode) check failed, or the account may not log in yet."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )
