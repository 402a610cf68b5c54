"""
Parser des documents DIDL-Lite retournes par l'action Browse.

Convertit chaque enfant container/item en variante étiquetée
(FolderNode, VideoLeafNode, OtherNode), dans l'ordre du document.

Certains serveurs double-échappent le document : en cas d'échec du parsing
direct, les entités HTML sont décodées puis le parsing est retenté.
"""

import html
import xml.etree.ElementTree as ET

from dlna_updater.core.errors import DidlParseError
from dlna_updater.core.value_objects import ContentNode, FolderNode, OtherNode, VideoLeafNode
from dlna_updater.utils.constants import (
    DC_NAMESPACE,
    DIDL_NAMESPACE,
    UPNP_CLASS_CONTAINER,
    UPNP_CLASS_VIDEO_ITEM,
    UPNP_NAMESPACE,
)

_CONTAINER_TAG = f"{{{DIDL_NAMESPACE}}}container"
_ITEM_TAG = f"{{{DIDL_NAMESPACE}}}item"
_RES_TAG = f"{{{DIDL_NAMESPACE}}}res"
_TITLE_TAG = f"{{{DC_NAMESPACE}}}title"
_CLASS_TAG = f"{{{UPNP_NAMESPACE}}}class"


def _parse_xml(payload: str, object_id: str) -> ET.Element:
    try:
        return ET.fromstring(payload)
    except ET.ParseError:
        pass

    try:
        return ET.fromstring(html.unescape(payload))
    except ET.ParseError as e:
        raise DidlParseError(object_id, f"DIDL-Lite illisible: {e}") from e


def _text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _to_node(element: ET.Element) -> ContentNode:
    node_id = element.get("id", "")
    title = _text(element, _TITLE_TAG)
    upnp_class = _text(element, _CLASS_TAG)

    if upnp_class.startswith(UPNP_CLASS_CONTAINER):
        return FolderNode(id=node_id, title=title)

    if upnp_class.startswith(UPNP_CLASS_VIDEO_ITEM):
        media_url = _text(element, _RES_TAG)
        if media_url:
            return VideoLeafNode(id=node_id, title=title, media_url=media_url)

    return OtherNode(id=node_id, title=title, upnp_class=upnp_class)


def parse_didl(payload: str, object_id: str = "") -> list[ContentNode]:
    """
    Parse un document DIDL-Lite en nœuds types.

    Args:
        payload: Contenu de l'élément Result de la réponse Browse
        object_id: ObjectID parcouru (pour les messages d'erreur)

    Returns:
        Nœuds dans l'ordre du document (liste vide pour un document vide)

    Raises:
        DidlParseError: Si le document reste illisible après décodage HTML
    """
    if not payload or not payload.strip():
        return []

    root = _parse_xml(payload, object_id)
    return [
        _to_node(child)
        for child in root
        if child.tag in (_CONTAINER_TAG, _ITEM_TAG)
    ]
