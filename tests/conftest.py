"""
Fixtures pytest partagees pour les tests DLNA Updater.

Ce module contient les fixtures communes utilisees dans les tests:
- Enregistrements video types (film, episode)
- Settings de test avec chemins temporaires
"""

from pathlib import Path

import pytest

from dlna_updater.config import Settings
from dlna_updater.core.entities import EnrichedRecord, VideoRecord
from dlna_updater.core.value_objects import EpisodeMarker


@pytest.fixture
def movie_record() -> VideoRecord:
    """VideoRecord pour un film type."""
    return VideoRecord(
        filename="Inception.2010.1080p.BluRay.x264.mkv",
        search_title="inception",
        media_url="http://192.168.2.104:8200/MediaItems/10.mkv",
    )


@pytest.fixture
def episode_record() -> VideoRecord:
    """VideoRecord pour un episode de serie type."""
    return VideoRecord(
        filename="The.Office.S02E05.720p.WEB-DL.mkv",
        search_title="the office",
        media_url="http://192.168.2.104:8200/MediaItems/11.mkv",
        episode_marker=EpisodeMarker(season=2, episode=5),
    )


@pytest.fixture
def enriched_movie(movie_record: VideoRecord) -> EnrichedRecord:
    """EnrichedRecord resolu pour le film type."""
    return EnrichedRecord.from_record(movie_record, "Inception", "tt1375666")


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier d'etat et les logs.
    """
    return Settings(
        dlna_base_url="http://dlna.test:8200",
        tmdb_base_url="https://api.themoviedb.org/3",
        catalog_base_url="https://catalog.test",
        state_file=tmp_path / "config.json",
        log_file=tmp_path / "test.log",
    )
