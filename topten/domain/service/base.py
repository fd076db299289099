"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span the list aggregate and its
    collaborators (repository, identity resolver).
    """

    pass
