"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services are built per request by the DI container and hold only their
    repositories and settings, never request data.
    """

    pass
