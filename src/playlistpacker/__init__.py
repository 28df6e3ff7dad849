"""Build time-boxed YouTube playlists from a song list."""

__version__ = "0.1.0"

# Import all public components
from .api import YouTubeAPI
from .auth import FileTokenStore, TokenStore, get_credentials, get_youtube_service
from .cli import main
from .commands import AuthorizeCommand, BuildPlaylistCommand, YouTubeCommand
from .core import YouTubeBase
from .errors import AuthorizationError, YouTubeError
from .logging_config import configure_logging, get_logger
from .packer import Budget, pack
from .resolver import Resolver, ResolvedVideo, ScoringWeights, SearchSettings
from .utils import parse_iso_duration

# Import config variables
from .config import (  # noqa: F401
    YOUTUBE_SCOPES,
    CLIENT_ID,
    CLIENT_SECRET,
    REDIRECT_URI,
    CREDENTIALS_DIR,
    TOKEN_FILE,
)

# Get logger for this module
logger = get_logger(__name__)
