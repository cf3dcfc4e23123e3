"""Repository-scoped configuration profiles."""

from .exceptions import ProfileError, ProfileFormatError, ProfileUnavailableError
from .profile import EmptyProfile, Profile, YamlProfile

__all__ = [
    "Profile",
    "EmptyProfile",
    "YamlProfile",
    "ProfileError",
    "ProfileFormatError",
    "ProfileUnavailableError",
]
