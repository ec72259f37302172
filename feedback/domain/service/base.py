"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the consistency rules that span a repository call:
    input validation, status transitions, vote toggling and warning
    precedence.
    """

    pass
