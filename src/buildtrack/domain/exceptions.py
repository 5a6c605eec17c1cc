"""Domain exceptions."""


class BuildTrackError(Exception):
    """Base exception for BuildTrack."""

    pass


class PermissionDenied(BuildTrackError):
    """User does not have permission for the requested action."""

    pass


class NotFound(BuildTrackError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ValidationError(BuildTrackError):
    """Validation failed for input data."""

    pass


class GatewayError(BuildTrackError):
    """Call to the backing data store failed."""

    pass
