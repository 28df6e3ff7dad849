"""Resolve song queries to a single best-matching video."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from . import config
from .core import YouTubeBase
from .errors import YouTubeError
from .logging_config import get_logger
from .utils import to_minutes

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the candidate scoring heuristic.

    A large bonus for typical song length dominates; distance from the ideal
    length and the position in the relevance ordering only break ties.
    """

    length_bonus: float = 1000
    min_seconds: int = 120
    max_seconds: int = 480
    ideal_seconds: int = 240
    distance_divisor: float = 10
    rank_penalty: float = 1


@dataclass(frozen=True)
class SearchSettings:
    """Search parameters shared by every query of a run."""

    region_code: str = config.REGION_CODE
    relevance_language: str = config.RELEVANCE_LANGUAGE
    max_results: int = config.SEARCH_MAX_RESULTS
    order: str = "relevance"


@dataclass(frozen=True)
class Candidate:
    """A search hit awaiting scoring."""

    video_id: str
    duration_seconds: int
    title: str
    search_rank: int


@dataclass(frozen=True)
class ResolvedVideo:
    """The video chosen for one query."""

    query: str
    video_id: str


def query_variants(query: str) -> List[str]:
    """Search strings to try for a query, most specific first."""
    return [
        f"{query} official video",
        f'"{query}"',
        f"{query} audio",
    ]


def score_candidate(candidate: Candidate, weights: ScoringWeights = ScoringWeights()) -> float:
    """Score a candidate, higher is better.

    Args:
        candidate: Candidate to score
        weights: Heuristic weights

    Returns:
        The candidate's score
    """
    duration = candidate.duration_seconds
    bonus = (
        weights.length_bonus
        if weights.min_seconds <= duration <= weights.max_seconds
        else 0
    )
    distance = abs(weights.ideal_seconds - duration) / weights.distance_divisor
    return bonus - distance - candidate.search_rank * weights.rank_penalty


def select_best(
    candidates: Sequence[Candidate], weights: ScoringWeights = ScoringWeights()
) -> Optional[Candidate]:
    """Pick the highest scoring candidate.

    Ties go to the candidate seen first.

    Args:
        candidates: Candidates in search order
        weights: Heuristic weights

    Returns:
        Best candidate, or None if there are none
    """
    if not candidates:
        return None
    return max(candidates, key=lambda c: score_candidate(c, weights))


class Resolver:
    """Maps free-text song queries to video IDs."""

    def __init__(
        self,
        youtube: YouTubeBase,
        settings: SearchSettings = SearchSettings(),
        weights: ScoringWeights = ScoringWeights(),
    ):
        """Initialize resolver.

        Args:
            youtube: YouTube API client
            settings: Region, language and result cap for searches
            weights: Candidate scoring weights
        """
        self.youtube = youtube
        self.settings = settings
        self.weights = weights

    def find_candidates(self, query: str) -> List[Candidate]:
        """Collect candidates from the first query variant with any hits.

        Args:
            query: Song query

        Returns:
            Candidates from a single variant, empty if no variant had hits

        Raises:
            YouTubeError: If a search or duration lookup fails
        """
        for variant in query_variants(query):
            results = self.youtube.search_videos(
                variant,
                max_results=self.settings.max_results,
                order=self.settings.order,
                region_code=self.settings.region_code,
                relevance_language=self.settings.relevance_language,
            )
            if not results:
                logger.debug("No hits for variant %s", variant)
                continue

            durations = self.youtube.get_video_durations([r["video_id"] for r in results])
            return [
                Candidate(
                    video_id=result["video_id"],
                    duration_seconds=durations.get(result["video_id"], 0),
                    title=result.get("title", ""),
                    search_rank=rank,
                )
                for rank, result in enumerate(results)
            ]

        return []

    def resolve(self, query: str) -> Optional[str]:
        """Resolve one query to the best video.

        Args:
            query: Song query, "Artist - Title"

        Returns:
            Video ID, or None if no variant found anything

        Raises:
            YouTubeError: If a search or duration lookup fails
        """
        chosen = select_best(self.find_candidates(query), self.weights)
        if not chosen:
            return None

        logger.info(
            "  Using: %s (%dm) - %s",
            chosen.video_id,
            round(to_minutes(chosen.duration_seconds)),
            chosen.title,
        )
        return chosen.video_id

    def resolve_all(self, queries: Sequence[str], progress: bool = False) -> List[ResolvedVideo]:
        """Resolve queries in order, skipping misses and failures.

        Args:
            queries: Song queries in priority order
            progress: Show a progress bar

        Returns:
            Resolved videos in query order
        """
        resolved = []
        for query in tqdm(queries, desc="Resolving", unit="song", disable=not progress):
            logger.info("Searching: %s", query)
            try:
                video_id = self.resolve(query)
            except YouTubeError as e:
                logger.warning("Search error for %s: %s", query, str(e))
                continue

            if video_id:
                resolved.append(ResolvedVideo(query=query, video_id=video_id))
            else:
                logger.info("  No result for: %s", query)

        logger.info("Resolved %d of %d songs", len(resolved), len(queries))
        return resolved
