"""
Tests pour PublisherService.
"""

from unittest.mock import AsyncMock

import pytest

from dlna_updater.core.entities import EnrichedRecord
from dlna_updater.core.errors import PublishError
from dlna_updater.core.ports import ICatalogPublisher
from dlna_updater.services.publisher import PublisherService


@pytest.fixture
def mock_catalog() -> AsyncMock:
    return AsyncMock(spec=ICatalogPublisher)


class TestPublish:
    """Tests pour PublisherService.publish()."""

    @pytest.mark.asyncio
    async def test_payload_in_wire_format(self, mock_catalog, enriched_movie, episode_record):
        enriched_episode = EnrichedRecord.from_record(episode_record, "The Office", "tt0386676")

        await PublisherService(mock_catalog).publish([enriched_movie, enriched_episode])

        mock_catalog.publish.assert_awaited_once_with([
            {
                "title": "Inception",
                "imdb_id": "tt1375666",
                "url": "http://192.168.2.104:8200/MediaItems/10.mkv",
                "filename": "Inception.2010.1080p.BluRay.x264.mkv",
                "season": None,
                "episode": None,
            },
            {
                "title": "The Office",
                "imdb_id": "tt0386676",
                "url": "http://192.168.2.104:8200/MediaItems/11.mkv",
                "filename": "The.Office.S02E05.720p.WEB-DL.mkv",
                "season": 2,
                "episode": 5,
            },
        ])

    @pytest.mark.asyncio
    async def test_empty_list_still_published(self, mock_catalog):
        await PublisherService(mock_catalog).publish([])

        mock_catalog.publish.assert_awaited_once_with([])

    @pytest.mark.asyncio
    async def test_publish_error_propagates(self, mock_catalog, enriched_movie):
        mock_catalog.publish.side_effect = PublishError("Publication refusee: HTTP 401", 401)

        with pytest.raises(PublishError):
            await PublisherService(mock_catalog).publish([enriched_movie])

        assert mock_catalog.publish.await_count == 1
