"""Common test fixtures and utilities."""

from typing import Dict, Iterable, List
from unittest.mock import MagicMock

import pytest

from playlistpacker.core import YouTubeBase
from playlistpacker.errors import YouTubeError


class FakeYouTube(YouTubeBase):
    """In-memory YouTube with canned search results and durations."""

    def __init__(self):
        self.search_results: Dict[str, List[str]] = {}
        self.durations: Dict[str, int] = {}
        self.failing_searches = set()
        self.failing_adds = set()

        self.searches: List[str] = []
        self.duration_lookups: List[List[str]] = []
        self.playlists: Dict[str, Dict[str, str]] = {}
        self.added: List[tuple] = []

    def search_videos(
        self, query, max_results, order="relevance", region_code=None, relevance_language=None
    ):
        self.searches.append(query)
        if query in self.failing_searches:
            raise YouTubeError(f"Search failed for '{query}'")
        ids = self.search_results.get(query, [])[:max_results]
        return [{"video_id": vid, "title": f"Title {vid}"} for vid in ids]

    def get_video_durations(self, video_ids: Iterable[str]):
        ids = list(video_ids)
        self.duration_lookups.append(ids)
        return {vid: self.durations[vid] for vid in ids if vid in self.durations}

    def create_playlist(self, title, description, privacy_status="private"):
        playlist_id = f"PL{len(self.playlists) + 1}"
        self.playlists[playlist_id] = {
            "title": title,
            "description": description,
            "privacy_status": privacy_status,
        }
        return playlist_id

    def add_video_to_playlist(self, playlist_id, video_id):
        if video_id in self.failing_adds:
            raise YouTubeError(f"Failed to add video {video_id}")
        self.added.append((playlist_id, video_id))


@pytest.fixture
def fake_youtube() -> FakeYouTube:
    """Create an empty fake YouTube.

    Returns:
        FakeYouTube: Fake with no search results or durations
    """
    return FakeYouTube()


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock googleapiclient YouTube resource.

    Returns:
        MagicMock: Mock client with search, videos and playlist calls configured
    """
    mock = MagicMock()

    mock.search.return_value.list.return_value.execute.return_value = {
        "items": [
            {"id": {"kind": "youtube#video", "videoId": "vid1"}, "snippet": {"title": "Video 1"}},
            {"id": {"kind": "youtube#video", "videoId": "vid2"}, "snippet": {"title": "Video 2"}},
        ]
    }

    mock.videos.return_value.list.return_value.execute.return_value = {
        "items": [
            {"id": "vid1", "contentDetails": {"duration": "PT4M10S"}},
            {"id": "vid2", "contentDetails": {"duration": "PT1H2M3S"}},
        ]
    }

    mock.playlists.return_value.insert.return_value.execute.return_value = {"id": "PLnew"}
    mock.playlistItems.return_value.insert.return_value.execute.return_value = {}

    return mock
