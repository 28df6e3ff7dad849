"""Command module initialization."""

from .base import YouTubeCommand
from .authorize import AuthorizeCommand  # noqa: F401
from .build import BuildPlaylistCommand  # noqa: F401

__all__ = ["YouTubeCommand", "AuthorizeCommand", "BuildPlaylistCommand"]
