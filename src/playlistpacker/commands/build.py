"""Build a duration-budgeted playlist from a song list."""

from typing import List, Optional, Sequence

from .. import config
from ..core import YouTubeBase
from ..logging_config import get_logger
from ..packer import Budget, pack
from ..resolver import Resolver, ResolvedVideo, ScoringWeights, SearchSettings
from ..utils import playlist_url, to_minutes
from .base import YouTubeCommand

logger = get_logger(__name__)


class BuildPlaylistCommand(YouTubeCommand):
    """Command that resolves songs and packs them into a new playlist."""

    def __init__(
        self,
        youtube: YouTubeBase,
        queries: Sequence[str],
        budget: Budget,
        title: str = config.PLAYLIST_TITLE,
        description: str = config.PLAYLIST_DESCRIPTION,
        privacy_status: str = config.PLAYLIST_PRIVACY,
        settings: SearchSettings = SearchSettings(),
        weights: ScoringWeights = ScoringWeights(),
        dry_run: bool = False,
        progress: bool = False,
    ) -> None:
        """Initialize command.

        Args:
            youtube: YouTube API client
            queries: Song queries in priority order
            budget: Target length and allowed overrun
            title: Title of the new playlist
            description: Description of the new playlist
            privacy_status: public, unlisted or private
            settings: Search settings for the resolver
            weights: Candidate scoring weights
            dry_run: Resolve and pack without touching any playlist
            progress: Show a progress bar while resolving
        """
        super().__init__(youtube)
        self.queries = list(queries)
        self.budget = budget
        self.title = title
        self.description = description
        self.privacy_status = privacy_status
        self.resolver = Resolver(youtube, settings=settings, weights=weights)
        self.dry_run = dry_run
        self.progress = progress

        self.playlist_id: Optional[str] = None
        self.resolved: List[ResolvedVideo] = []
        self.added: List[str] = []
        self.total_seconds = 0

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.queries:
            raise ValueError("At least one song query is required")
        if self.budget.target_minutes <= 0:
            raise ValueError("Target duration must be positive")
        if self.budget.max_overrun_minutes < 0:
            raise ValueError("Overrun tolerance cannot be negative")
        if self.privacy_status not in ("public", "unlisted", "private"):
            raise ValueError(f"Invalid privacy status: {self.privacy_status}")

    def _append(self, video_id: str) -> None:
        if not self.dry_run:
            self.youtube.add_video_to_playlist(self.playlist_id, video_id)
        self.added.append(video_id)

    def _run(self) -> bool:
        """Run the build.

        Returns:
            bool: True once the run has completed, even if nothing was added
        """
        if self.dry_run:
            logger.info("Dry run: no playlist will be created")
        else:
            logger.info("Creating playlist...")
            self.playlist_id = self.youtube.create_playlist(
                self.title, self.description, self.privacy_status
            )
            logger.info("Playlist ID: %s", self.playlist_id)

        self.resolved = self.resolver.resolve_all(self.queries, progress=self.progress)
        video_ids = [video.video_id for video in self.resolved]

        durations = self.youtube.get_video_durations(video_ids) if video_ids else {}
        self.total_seconds = pack(video_ids, durations, self.budget, self._append)

        if not self.added:
            logger.warning("No videos were added")

        logger.info("Done. Total length ~ %d minutes.", round(to_minutes(self.total_seconds)))
        if self.dry_run:
            logger.info("Would add %d videos: %s", len(self.added), ", ".join(self.added))
        else:
            logger.info("Open your playlist: %s", playlist_url(self.playlist_id))

        return True
