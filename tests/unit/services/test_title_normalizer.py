"""
Tests pour la normalisation des titres bruts.

Verifie:
- L'extraction du marqueur saison/episode
- La troncature (saison/episode, resolution), le retrait des marqueurs de release
- Le retrait de l'annee finale et la reduction des espaces
- Le filtre des contenus indesirables
"""

import pytest

from dlna_updater.core.value_objects import EpisodeMarker, MediaType
from dlna_updater.services.title_normalizer import (
    extract_season_episode,
    is_unwanted,
    normalize_title,
)


class TestExtractSeasonEpisode:
    """Tests pour extract_season_episode()."""

    def test_extracts_season_and_episode(self):
        assert extract_season_episode("Show.Name.S02E05.1080p") == EpisodeMarker(season=2, episode=5)

    def test_returns_none_without_marker(self):
        assert extract_season_episode("Movie.Name.2020") is None

    def test_case_insensitive_single_digits(self):
        assert extract_season_episode("show s1e9 final") == EpisodeMarker(season=1, episode=9)

    def test_uses_first_match(self):
        assert extract_season_episode("Show.S01E01.S01E02") == EpisodeMarker(season=1, episode=1)


class TestNormalizeTitle:
    """Tests pour normalize_title()."""

    def test_series_title_truncated_before_marker(self):
        result = normalize_title("The.Show.S01E02.720p.BluRay-RARBG")

        assert result.search_title == "the show"
        assert result.episode_marker == EpisodeMarker(season=1, episode=2)
        assert result.media_type == MediaType.SERIES

    def test_movie_title_truncated_before_resolution_and_year_removed(self):
        result = normalize_title("Movie.Name.2020.1080p.BluRay-RARBG.mkv")

        assert result.search_title == "movie name"
        assert result.episode_marker is None
        assert result.media_type == MediaType.MOVIE

    def test_release_tags_removed_without_resolution_marker(self):
        result = normalize_title("Some.Film.BluRay.x264-RARBG")

        assert result.search_title == "some film"

    def test_braces_and_dashes_become_spaces(self):
        result = normalize_title("{Le}-Film")

        assert result.search_title == "le film"

    def test_whitespace_runs_collapsed(self):
        result = normalize_title("Big   Fish  x265   Edition")

        assert result.search_title == "big fish edition"

    def test_year_only_removed_at_the_end(self):
        result = normalize_title("Blade.Runner.2049.Final.Cut")

        assert result.search_title == "blade runner 2049 final cut"

    def test_multi_word_tags_removed(self):
        result = normalize_title("Filme.Dublado.WWW.BLUDV.COM.Full.HD")

        assert result.search_title == "filme dublado"

    def test_empty_title(self):
        result = normalize_title("")

        assert result.search_title == ""
        assert result.episode_marker is None

    def test_title_reduced_to_nothing(self):
        result = normalize_title("1080p.mkv")

        assert result.search_title == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "The.Show.S01E02.720p.BluRay-RARBG",
            "Movie.Name.2020.1080p.BluRay-RARBG.mkv",
            "Some.Film.BluRay.x264-RARBG",
            "Big   Fish  x265   Edition",
        ],
    )
    def test_normalization_is_idempotent(self, raw: str):
        first = normalize_title(raw).search_title

        assert normalize_title(first).search_title == first


class TestIsUnwanted:
    """Tests pour is_unwanted()."""

    def test_gambling_promo_rejected(self):
        assert is_unwanted("1xbet-promo.mkv") is True

    def test_match_is_case_insensitive(self):
        assert is_unwanted("Promo.1XBET.Bonus.mp4") is True

    def test_regular_title_kept(self):
        assert is_unwanted("Movie.Name.2020.mkv") is False

    def test_custom_patterns(self):
        assert is_unwanted("Sample.Clip.mkv", patterns=["sample"]) is True
        assert is_unwanted("1xbet.mkv", patterns=["sample"]) is False
