"""Exception types for the mute plugin."""


class MuteError(Exception):
    """Base exception for all mute plugin errors."""
    pass


class UserInputError(MuteError):
    """Command argument could not be resolved. Reported back to the actor."""
    pass


class AuthorizationDenied(MuteError):
    """Actor does not hold any of the roles allowed to run commands."""
    pass


class CorruptPersistedState(MuteError):
    """Persisted mute list could not be decoded."""
    def __init__(self, message: str, blob: str | None = None) -> None:
        super().__init__(message)
        self.blob = blob


class CollaboratorUnavailable(MuteError):
    """A required room collaborator was not supplied."""
    def __init__(self, collaborator: str) -> None:
        super().__init__(f"Required collaborator is missing: {collaborator}")
        self.collaborator = collaborator
