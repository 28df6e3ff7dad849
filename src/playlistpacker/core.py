"""YouTube API base class."""

from typing import Dict, Iterable, List


class YouTubeBase:
    """Base class for the YouTube operations the playlist builder relies on.

    The resolver and packer only talk to this interface, so tests can swap in
    fakes that return canned search results and durations.
    """

    def search_videos(
        self,
        query: str,
        max_results: int,
        order: str = "relevance",
        region_code: str = None,
        relevance_language: str = None,
    ) -> List[Dict[str, str]]:
        """Search for videos.

        Args:
            query: Free-text search query
            max_results: Maximum number of results to return
            order: Result ordering mode
            region_code: ISO 3166-1 alpha-2 region hint
            relevance_language: ISO 639-1 language hint

        Returns:
            List of video dictionaries with video_id and title, in result order

        Raises:
            YouTubeError: If API request fails
        """
        raise NotImplementedError

    def get_video_durations(self, video_ids: Iterable[str]) -> Dict[str, int]:
        """Get the duration of each video.

        Args:
            video_ids: IDs of videos to look up

        Returns:
            Mapping of video ID to duration in seconds. Unknown IDs are absent.

        Raises:
            YouTubeError: If API request fails
        """
        raise NotImplementedError

    def create_playlist(
        self, title: str, description: str, privacy_status: str = "private"
    ) -> str:
        """Create a new playlist.

        Args:
            title: Playlist title
            description: Playlist description
            privacy_status: public, unlisted or private

        Returns:
            ID of the created playlist

        Raises:
            YouTubeError: If API request fails
        """
        raise NotImplementedError

    def add_video_to_playlist(self, playlist_id: str, video_id: str) -> None:
        """Append a video to a playlist.

        Args:
            playlist_id: ID of playlist to add to
            video_id: ID of video to add

        Raises:
            PlaylistNotFoundError: If playlist is not found
            YouTubeError: If API request fails
        """
        raise NotImplementedError
