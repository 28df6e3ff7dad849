"""YouTube API wrapper."""

from typing import Dict, Iterable, List

from . import config
from .core import YouTubeBase
from .errors import PlaylistNotFoundError, QuotaExceededError, YouTubeError
from .logging_config import get_logger
from .utils import parse_iso_duration

logger = get_logger(__name__)


def _wrap_error(error: Exception, message: str) -> YouTubeError:
    """Map a client exception onto the package's error types."""
    if "quotaExceeded" in str(error):
        return QuotaExceededError(f"{message}: daily quota exceeded")
    if "playlistNotFound" in str(error):
        return PlaylistNotFoundError(f"{message}: playlist not found")
    return YouTubeError(f"{message}: {str(error)}")


class YouTubeAPI(YouTubeBase):
    """Wrapper for YouTube API operations."""

    def __init__(self, youtube, batch_size: int = config.DURATION_BATCH_SIZE):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client from googleapiclient.discovery.build
            batch_size: Maximum number of IDs per videos.list call
        """
        self.youtube = youtube
        self.batch_size = batch_size

    def search_videos(
        self,
        query: str,
        max_results: int = config.SEARCH_MAX_RESULTS,
        order: str = "relevance",
        region_code: str = None,
        relevance_language: str = None,
    ) -> List[Dict[str, str]]:
        params = {
            "part": "id,snippet",
            "q": query,
            "type": "video",
            "maxResults": max_results,
            "order": order,
            "safeSearch": "none",
        }
        # No publishedAfter/Before: official uploads often post-date the release
        if region_code:
            params["regionCode"] = region_code
        if relevance_language:
            params["relevanceLanguage"] = relevance_language

        try:
            response = self.youtube.search().list(**params).execute()
        except Exception as e:
            raise _wrap_error(e, f"Search failed for '{query}'") from e

        videos = []
        for item in response.get("items", []):
            video_id = item.get("id", {}).get("videoId")
            if not video_id:
                continue
            videos.append({
                "video_id": video_id,
                "title": item.get("snippet", {}).get("title", ""),
            })

        logger.debug("Search '%s' returned %d videos", query, len(videos))
        return videos

    def get_video_durations(self, video_ids: Iterable[str]) -> Dict[str, int]:
        # dict.fromkeys drops duplicates but keeps order
        ids = list(dict.fromkeys(vid for vid in video_ids if vid))
        durations: Dict[str, int] = {}

        for start in range(0, len(ids), self.batch_size):
            batch = ids[start:start + self.batch_size]
            try:
                response = self.youtube.videos().list(
                    part="contentDetails",
                    id=",".join(batch),
                    maxResults=self.batch_size,
                ).execute()
            except Exception as e:
                raise _wrap_error(e, "Failed to get video durations") from e

            for item in response.get("items", []):
                durations[item["id"]] = parse_iso_duration(
                    item.get("contentDetails", {}).get("duration")
                )

        return durations

    def create_playlist(
        self, title: str, description: str, privacy_status: str = "private"
    ) -> str:
        try:
            response = self.youtube.playlists().insert(
                part="snippet,status",
                body={
                    "snippet": {"title": title, "description": description},
                    "status": {"privacyStatus": privacy_status},
                },
            ).execute()
        except Exception as e:
            raise _wrap_error(e, "Failed to create playlist") from e

        playlist_id = response.get("id")
        if not playlist_id:
            raise YouTubeError("Failed to create playlist: no ID in response")
        return playlist_id

    def add_video_to_playlist(self, playlist_id: str, video_id: str) -> None:
        try:
            request = self.youtube.playlistItems().insert(
                part="snippet",
                body={
                    "snippet": {
                        "playlistId": playlist_id,
                        "resourceId": {"kind": "youtube#video", "videoId": video_id},
                    }
                },
            )
            request.execute()
        except Exception as e:
            raise _wrap_error(e, f"Failed to add video {video_id}") from e
