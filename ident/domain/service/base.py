"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span entities and repositories. Their only
    state is the collaborators they are built with.
    """
