"""Configuration models shared by the command line and the workflow driver."""

from enum import Enum


class GitHubAuthenticationType(str, Enum):
    """How the release client authenticates against GitHub."""

    PAT = "pat"
    APP = "app"
