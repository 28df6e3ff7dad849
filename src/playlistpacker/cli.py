"""Command-line interface for building playlists."""

import argparse
import sys

from . import api, auth, commands, config
from .errors import ConfigurationError, YouTubeError
from .logging_config import configure_logging, get_logger
from .packer import Budget
from .resolver import SearchSettings

logger = get_logger(__name__)


def _add_auth_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--redirect-uri", default=config.REDIRECT_URI, help="OAuth redirect URI to listen on"
    )
    parser.add_argument(
        "--no-browser", action="store_true", help="Print the consent URL without opening it"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Build a time-boxed YouTube playlist")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Build command
    build_parser = subparsers.add_parser("build", help="Search songs and build a playlist")
    build_parser.add_argument(
        "--songs-file",
        default=config.SONGS_FILE,
        help="File with one 'Artist - Title' per line (default: built-in list)",
    )
    build_parser.add_argument(
        "--target-minutes", type=int, default=config.TARGET_MINUTES, help="Target length"
    )
    build_parser.add_argument(
        "--max-overrun",
        type=int,
        default=config.MAX_OVERRUN_MINUTES,
        help="Minutes the playlist may run past the target",
    )
    build_parser.add_argument("--region", default=config.REGION_CODE, help="Search region code")
    build_parser.add_argument(
        "--language", default=config.RELEVANCE_LANGUAGE, help="Search relevance language"
    )
    build_parser.add_argument("--title", default=config.PLAYLIST_TITLE, help="Playlist title")
    build_parser.add_argument(
        "--description", default=config.PLAYLIST_DESCRIPTION, help="Playlist description"
    )
    build_parser.add_argument(
        "--privacy",
        choices=["public", "unlisted", "private"],
        default=config.PLAYLIST_PRIVACY,
        help="Playlist visibility",
    )
    build_parser.add_argument(
        "--dry-run", action="store_true", help="Resolve and pack without creating a playlist"
    )
    build_parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    _add_auth_arguments(build_parser)

    # Authorize command
    authorize_parser = subparsers.add_parser(
        "authorize", help="Run the OAuth consent flow and store the token"
    )
    _add_auth_arguments(authorize_parser)

    return parser


def build_command(args: argparse.Namespace) -> commands.BuildPlaylistCommand:
    """Authenticate and set up the build command from parsed arguments."""
    queries = config.load_queries(args.songs_file)
    creds = auth.get_credentials(redirect_uri=args.redirect_uri, open_browser=not args.no_browser)
    youtube = api.YouTubeAPI(auth.get_youtube_service(creds))

    return commands.BuildPlaylistCommand(
        youtube=youtube,
        queries=queries,
        budget=Budget(args.target_minutes, args.max_overrun),
        title=args.title,
        description=args.description,
        privacy_status=args.privacy,
        settings=SearchSettings(region_code=args.region, relevance_language=args.language),
        dry_run=args.dry_run,
        progress=args.progress,
    )


def main() -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(args=None if sys.argv[1:] else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(debug=args.debug)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config.require_client_credentials()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    try:
        if args.command == "authorize":
            command = commands.AuthorizeCommand(
                redirect_uri=args.redirect_uri, open_browser=not args.no_browser
            )
        else:
            command = build_command(args)

        if not command.run():
            logger.error("Command failed to run successfully")
            return 1
        return 0

    except YouTubeError as e:
        logger.error("Command failed: %s", str(e))
        return 1
    except Exception as e:
        logger.exception("Unexpected error: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
