"""Duration-budgeted playlist packing."""

from dataclasses import dataclass
from typing import Callable, Dict, Sequence

from .errors import YouTubeError
from .logging_config import get_logger
from .utils import to_minutes

logger = get_logger(__name__)


@dataclass(frozen=True)
class Budget:
    """Target playlist length and how far past it a run may go, in minutes."""

    target_minutes: float
    max_overrun_minutes: float = 0

    @property
    def limit_minutes(self) -> float:
        return self.target_minutes + self.max_overrun_minutes

    @property
    def target_seconds(self) -> float:
        return self.target_minutes * 60

    @property
    def max_overrun_seconds(self) -> float:
        return self.max_overrun_minutes * 60


def pack(
    video_ids: Sequence[str],
    durations: Dict[str, int],
    budget: Budget,
    append: Callable[[str], None],
) -> int:
    """Append videos in order until the budget's target is reached.

    Packing stops at the first video that would push the total past
    ``target + overrun`` (later, shorter videos are not tried) or right after
    an append brings the total to the target. Comparisons are done in
    real-valued minutes.

    Args:
        video_ids: Video IDs in priority order
        durations: Duration in seconds per video ID; missing IDs count as 0
        budget: Target and allowed overrun
        append: Adds one video to the playlist, raises YouTubeError on failure

    Returns:
        Total duration of the appended videos in seconds
    """
    total = 0
    added = 0

    for video_id in video_ids:
        duration = durations.get(video_id, 0)
        if to_minutes(total + duration) > budget.limit_minutes:
            logger.info(
                "Stopping: %s (%d min) would exceed %s min",
                video_id,
                round(to_minutes(duration)),
                budget.limit_minutes,
            )
            break

        try:
            append(video_id)
        except YouTubeError as e:
            logger.warning("Add error for %s: %s", video_id, str(e))
            continue

        total += duration
        added += 1
        logger.info(
            "Added %s (%d min). Total: %d min",
            video_id,
            round(to_minutes(duration)),
            round(to_minutes(total)),
        )

        if to_minutes(total) >= budget.target_minutes:
            logger.info("Target of %s min reached", budget.target_minutes)
            break
    else:
        logger.info("Ran out of videos before reaching %s min", budget.target_minutes)

    logger.debug("Packed %d of %d videos", added, len(video_ids))
    return total
