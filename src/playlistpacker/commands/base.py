"""Base command class for YouTube operations."""

from ..errors import YouTubeError
from ..logging_config import get_logger

# Get logger for this module
logger = get_logger(__name__)


class YouTubeCommand:
    """Base class for YouTube commands."""

    def __init__(self, youtube=None):
        """Initialize command.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube
        self._logger = logger
        self._validated = False
        self.dry_run = False
        self.verbose = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.youtube:
            raise ValueError("YouTube API client is required")
        self._validated = True

    def run(self) -> bool:
        """Run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            YouTubeError: If command fails
        """
        try:
            self.validate()
            return self._run()
        except YouTubeError:
            raise
        except Exception as e:
            raise YouTubeError(str(e)) from e

    def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False
