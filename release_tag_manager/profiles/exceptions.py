"""Contains exceptions raised when reading repository profiles."""


class ProfileError(Exception):
    """Base class for errors raised while reading a profile."""

    pass


class ProfileUnavailableError(ProfileError):
    """Raised when a profile cannot be read from its location."""

    def __init__(self, location: str) -> None:
        """Initializes the exception with the location of the unreadable profile."""
        super().__init__(f"Can't read profile: '{location}'")
        self.location = location


class ProfileFormatError(ProfileError):
    """Raised when a profile is read but its content is not a valid YAML mapping."""

    def __init__(self, location: str, reason: str) -> None:
        """Initializes the exception with the profile location and the parse failure."""
        super().__init__(f"Profile '{location}' is malformed: {reason}")
        self.location = location
        self.reason = reason
