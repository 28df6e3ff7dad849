"""Error handling utilities."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error("%s: %s", context, str(error))
    else:
        logger.error(str(error))


class YouTubeError(Exception):
    """Base class for YouTube API errors."""

    pass


class PlaylistNotFoundError(YouTubeError):
    """Error raised when a playlist is not found."""

    pass


class QuotaExceededError(YouTubeError):
    """Error raised when the daily API quota is used up."""

    pass


class AuthorizationError(YouTubeError):
    """Error raised when the OAuth round trip fails or is refused."""

    pass


class ConfigurationError(YouTubeError):
    """Error raised when required settings are missing."""

    pass
