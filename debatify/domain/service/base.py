"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services are REQUEST-scoped in the container: they share the request's
    repositories, and with them its database transaction.
    """

    pass
