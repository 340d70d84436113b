"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the client-side logic that does not belong to a
    single entity: tree state and rendering.
    """

    pass
