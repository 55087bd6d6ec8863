"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the rules that span a repository and its callers:
    ownership checks, account resolution, token and password handling.
    """

    pass
