"""Tests for query resolution and candidate scoring."""

from unittest.mock import MagicMock

import pytest

from playlistpacker.errors import QuotaExceededError, YouTubeError
from playlistpacker.resolver import (
    Candidate,
    Resolver,
    ResolvedVideo,
    ScoringWeights,
    SearchSettings,
    query_variants,
    score_candidate,
    select_best,
)


def test_query_variants_order():
    """Test the three search variants and their order."""
    assert query_variants("Radiohead - Creep") == [
        "Radiohead - Creep official video",
        '"Radiohead - Creep"',
        "Radiohead - Creep audio",
    ]


def test_score_candidates():
    """Test scores for typical, typical and overlong candidates."""
    a = Candidate("A", 130, "a", 0)
    b = Candidate("B", 300, "b", 1)
    c = Candidate("C", 500, "c", 2)

    assert score_candidate(a) == 989
    assert score_candidate(b) == 993
    assert score_candidate(c) == -28
    assert select_best([a, b, c]) is b


def test_score_window_is_inclusive():
    """Test that 120s and 480s both earn the length bonus."""
    assert score_candidate(Candidate("x", 120, "", 0)) == 1000 - 12
    assert score_candidate(Candidate("y", 480, "", 0)) == 1000 - 24
    assert score_candidate(Candidate("z", 119, "", 0)) < 0


def test_select_best_tie_keeps_first_seen():
    """Test that equal scores resolve to the earlier candidate."""
    first = Candidate("first", 250, "", 0)
    second = Candidate("second", 230, "", 0)

    assert score_candidate(first) == score_candidate(second)
    assert select_best([first, second]) is first


def test_select_best_empty():
    """Test selecting from no candidates."""
    assert select_best([]) is None


def test_custom_weights():
    """Test that weights can be tuned."""
    weights = ScoringWeights(length_bonus=0, rank_penalty=100)
    near = Candidate("near", 240, "", 1)
    far = Candidate("far", 400, "", 0)

    assert score_candidate(near, weights) == -100
    assert score_candidate(far, weights) == -16
    assert select_best([near, far], weights) is far


def test_resolve_uses_first_variant(fake_youtube):
    """Test that the first variant with hits wins."""
    fake_youtube.search_results["Seal - Crazy official video"] = ["short", "good"]
    fake_youtube.durations = {"short": 60, "good": 270}

    resolver = Resolver(fake_youtube)

    assert resolver.resolve("Seal - Crazy") == "good"
    assert fake_youtube.searches == ["Seal - Crazy official video"]
    assert fake_youtube.duration_lookups == [["short", "good"]]


def test_resolve_falls_back_to_quoted_variant(fake_youtube):
    """Test that candidates come only from the quoted variant when the first is empty."""
    fake_youtube.search_results['"Snow - Informer"'] = ["q1", "q2"]
    fake_youtube.search_results["Snow - Informer audio"] = ["audio1"]
    fake_youtube.durations = {"q1": 600, "q2": 700, "audio1": 240}

    resolver = Resolver(fake_youtube)

    # audio1 would score higher but belongs to a later variant
    assert resolver.resolve("Snow - Informer") == "q1"
    assert fake_youtube.searches == ["Snow - Informer official video", '"Snow - Informer"']
    assert fake_youtube.duration_lookups == [["q1", "q2"]]


def test_resolve_falls_back_to_audio_variant(fake_youtube):
    """Test the last variant is tried when the others are empty."""
    fake_youtube.search_results["U2 - One audio"] = ["one"]
    fake_youtube.durations = {"one": 276}

    assert Resolver(fake_youtube).resolve("U2 - One") == "one"
    assert len(fake_youtube.searches) == 3


def test_resolve_no_result(fake_youtube):
    """Test that a query with no hits anywhere returns None."""
    assert Resolver(fake_youtube).resolve("Nobody - Nothing") is None
    assert len(fake_youtube.searches) == 3
    assert fake_youtube.duration_lookups == []


def test_resolve_missing_duration_counts_as_zero(fake_youtube):
    """Test candidates absent from the duration lookup score as 0 seconds."""
    fake_youtube.search_results["X - Y official video"] = ["unknown", "known"]
    fake_youtube.durations = {"known": 200}

    assert Resolver(fake_youtube).resolve("X - Y") == "known"


def test_resolve_passes_search_settings():
    """Test region, language, cap and ordering reach the search call."""
    youtube = MagicMock()
    youtube.search_videos.return_value = [{"video_id": "v", "title": "t"}]
    youtube.get_video_durations.return_value = {"v": 200}

    settings = SearchSettings(region_code="US", relevance_language="fr", max_results=5)
    Resolver(youtube, settings=settings).resolve("Madonna - Vogue")

    youtube.search_videos.assert_called_once_with(
        "Madonna - Vogue official video",
        max_results=5,
        order="relevance",
        region_code="US",
        relevance_language="fr",
    )


def test_resolve_propagates_errors(fake_youtube):
    """Test search failures propagate from resolve."""
    fake_youtube.failing_searches.add("A - B official video")

    with pytest.raises(YouTubeError):
        Resolver(fake_youtube).resolve("A - B")


def test_resolve_all_skips_misses_and_failures(fake_youtube):
    """Test resolve_all keeps query order and drops misses and errors."""
    fake_youtube.search_results["A official video"] = ["a1"]
    fake_youtube.failing_searches.add("B official video")
    fake_youtube.search_results["D official video"] = ["d1"]
    fake_youtube.durations = {"a1": 200, "d1": 200}

    resolved = Resolver(fake_youtube).resolve_all(["A", "B", "C", "D"])

    assert resolved == [ResolvedVideo("A", "a1"), ResolvedVideo("D", "d1")]


def test_resolve_all_continues_after_quota_error():
    """Test that a quota error for one query does not stop the others."""
    youtube = MagicMock()
    youtube.search_videos.side_effect = [
        QuotaExceededError("quota"),
        [{"video_id": "b1", "title": "B"}],
    ]
    youtube.get_video_durations.return_value = {"b1": 180}

    resolved = Resolver(youtube).resolve_all(["A", "B"])

    assert [video.video_id for video in resolved] == ["b1"]


def test_resolve_all_does_not_swallow_unexpected_errors():
    """Test that non-API errors propagate."""
    youtube = MagicMock()
    youtube.search_videos.side_effect = KeyError("items")

    with pytest.raises(KeyError):
        Resolver(youtube).resolve_all(["A"])
