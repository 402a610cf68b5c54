"""
Tests du parser DIDL-Lite.
"""

from xml.sax.saxutils import escape

import pytest

from dlna_updater.adapters.dlna.didl_parser import parse_didl
from dlna_updater.core.errors import BrowseError, DidlParseError
from dlna_updater.core.value_objects import FolderNode, OtherNode, VideoLeafNode
from tests.fixtures.didl_responses import ROOT_DIDL, audio, didl, folder, video


class TestParseDidl:
    """Classification des enfants container/item."""

    def test_folder_and_video_in_document_order(self):
        nodes = parse_didl(ROOT_DIDL, "2$15")

        assert nodes == [
            FolderNode(id="2$15$0", title="Films"),
            VideoLeafNode(
                id="2$15$1",
                title="1xbet-promo.mkv",
                media_url="http://192.168.2.104:8200/MediaItems/1.mkv",
            ),
        ]

    def test_video_subclass_is_video_leaf(self):
        payload = didl(
            video("1", "Movie.mkv", "http://nas/1.mkv", upnp_class="object.item.videoItem.movie")
        )

        assert parse_didl(payload) == [
            VideoLeafNode(id="1", title="Movie.mkv", media_url="http://nas/1.mkv")
        ]

    def test_audio_item_is_other_node(self):
        nodes = parse_didl(didl(audio("9", "song.mp3")))

        assert nodes == [
            OtherNode(id="9", title="song.mp3", upnp_class="object.item.audioItem.musicTrack")
        ]

    def test_video_without_resource_is_other_node(self):
        payload = didl(
            '<item id="5"><dc:title>broken.mkv</dc:title>'
            "<upnp:class>object.item.videoItem</upnp:class></item>"
        )

        nodes = parse_didl(payload)

        assert len(nodes) == 1
        assert isinstance(nodes[0], OtherNode)

    def test_title_with_special_characters(self):
        nodes = parse_didl(didl(folder("3", "Films & Séries")))

        assert nodes == [FolderNode(id="3", title="Films & Séries")]

    @pytest.mark.parametrize("payload", ["", "   ", "\n"])
    def test_empty_payload_returns_empty_list(self, payload):
        assert parse_didl(payload) == []

    def test_empty_document_returns_empty_list(self):
        assert parse_didl(didl()) == []


class TestParseDidlEscaping:
    """Documents double-echappes et documents illisibles."""

    def test_html_escaped_document_is_decoded(self):
        payload = escape(ROOT_DIDL)

        nodes = parse_didl(payload, "2$15")

        assert [node.id for node in nodes] == ["2$15$0", "2$15$1"]

    def test_unparseable_document_raises(self):
        with pytest.raises(DidlParseError) as exc_info:
            parse_didl("<DIDL-Lite><item></DIDL-Lite>", "2$15$7")

        assert exc_info.value.object_id == "2$15$7"

    def test_parse_error_is_a_browse_error(self):
        with pytest.raises(BrowseError):
            parse_didl("not xml at all <", "2$15")
