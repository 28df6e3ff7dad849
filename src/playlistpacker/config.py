"""Configuration and environment settings."""

import os
from typing import List, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

# Force reload of environment variables
load_dotenv(override=True)

# Directory Settings
DATA_DIR = os.getenv("DATA_DIR", "data")
CREDENTIALS_DIR = os.getenv("CREDENTIALS_DIR", os.path.join(DATA_DIR, "credentials"))

# YouTube API Settings
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube"]
CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
REDIRECT_URI = os.getenv("GOOGLE_REDIRECT_URI", "http://127.0.0.1:5173/oauth2callback")
TOKEN_FILE = os.path.join(CREDENTIALS_DIR, "token.json")

SEARCH_MAX_RESULTS = 8
DURATION_BATCH_SIZE = 50  # videos.list accepts at most 50 ids per call

# Playlist Settings
TARGET_MINUTES = int(os.getenv("TARGET_MINUTES", "120"))
MAX_OVERRUN_MINUTES = int(os.getenv("MAX_OVERRUN_MINUTES", "5"))
REGION_CODE = os.getenv("REGION_CODE", "CA")
RELEVANCE_LANGUAGE = os.getenv("RELEVANCE_LANGUAGE", "en")
PLAYLIST_TITLE = os.getenv("PLAYLIST_TITLE", "Early 90s Hits (1990-1993) ~2h")
PLAYLIST_DESCRIPTION = os.getenv(
    "PLAYLIST_DESCRIPTION", "Auto-compiled playlist of popular songs from 1990-1993."
)
PLAYLIST_PRIVACY = os.getenv("PLAYLIST_PRIVACY", "private")
SONGS_FILE = os.getenv("SONGS_FILE")

# Seed list, "Artist - Title"
DEFAULT_SONGS = [
    "Madonna - Vogue",
    "Vanilla Ice - Ice Ice Baby",
    "Deee-Lite - Groove Is in the Heart",
    "Roxette - It Must Have Been Love",
    "MC Hammer - U Can't Touch This",
    "George Michael - Freedom! '90",
    "Nirvana - Smells Like Teen Spirit",
    "R.E.M. - Losing My Religion",
    "Michael Jackson - Black or White",
    "Paula Abdul - Rush Rush",
    "Seal - Crazy",
    "Right Said Fred - I'm Too Sexy",
    "Boyz II Men - End of the Road",
    "Whitney Houston - I Will Always Love You",
    "Kris Kross - Jump",
    "Guns N' Roses - November Rain",
    "Radiohead - Creep",
    "U2 - One",
    "Ace of Base - All That She Wants",
    "4 Non Blondes - What's Up",
    "Snow - Informer",
    "Snap! - Rhythm Is a Dancer",
    "Haddaway - What Is Love",
    "House of Pain - Jump Around",
    "Robin S. - Show Me Love",
    "En Vogue - My Lovin' (You're Never Gonna Get It)",
    "PM Dawn - Set Adrift on Memory Bliss",
    "Mariah Carey - Dreamlover",
    "Counting Crows - Mr. Jones",
]


def load_queries(path: Optional[str] = None) -> List[str]:
    """Load song queries from a text file.

    Args:
        path: File with one "Artist - Title" query per line. Blank lines and
            lines starting with ``#`` are ignored. If None, the built-in list
            is returned.

    Returns:
        List of queries in file order
    """
    if not path:
        return list(DEFAULT_SONGS)

    queries = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                queries.append(line)
    return queries


def require_client_credentials() -> None:
    """Check the OAuth client settings are present.

    Raises:
        ConfigurationError: If GOOGLE_CLIENT_ID or GOOGLE_CLIENT_SECRET is missing
    """
    if not CLIENT_ID or not CLIENT_SECRET:
        raise ConfigurationError(
            "Missing GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET in environment or .env"
        )
