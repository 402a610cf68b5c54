"""
Client ContentDirectory UPnP/DLNA.

Implemente IContentDirectory au-dessus de httpx :
- découverte du service ContentDirectory dans la description du périphérique
- action SOAP Browse (BrowseDirectChildren, sans pagination)
- parsing du Result DIDL-Lite en nœuds types

Usage:
    async with ContentDirectoryClient("http://192.168.2.104:8200") as client:
        nodes = await client.browse("2$15")
"""

import xml.etree.ElementTree as ET
from typing import Optional
from urllib.parse import urljoin
from xml.sax.saxutils import escape

import httpx
from loguru import logger

from dlna_updater.adapters.dlna.didl_parser import parse_didl
from dlna_updater.core.errors import BrowseError
from dlna_updater.core.ports import IContentDirectory
from dlna_updater.core.value_objects import ContentNode
from dlna_updater.utils.constants import (
    DEVICE_NAMESPACE,
    UPNP_SERVICE_ID_CONTENT,
    UPNP_SERVICE_TYPE_CONTENT,
)

_SOAP_ENVELOPE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
    's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">'
    "<s:Body>"
    '<u:Browse xmlns:u="{service_type}">'
    "<ObjectID>{object_id}</ObjectID>"
    "<BrowseFlag>BrowseDirectChildren</BrowseFlag>"
    "<Filter>*</Filter>"
    "<StartingIndex>0</StartingIndex>"
    "<RequestedCount>0</RequestedCount>"
    "<SortCriteria></SortCriteria>"
    "</u:Browse>"
    "</s:Body>"
    "</s:Envelope>"
)


class ContentDirectoryClient(IContentDirectory):
    """
    Client du service ContentDirectory d'un serveur DLNA.

    Le client HTTP est créé paresseusement et libéré par close() ou à la
    sortie du bloc async with. Le controlURL est découvert une seule fois.

    Attributes:
        base_url: URL de base du serveur (ex: http://192.168.2.104:8200)
        description_path: Chemin de la description du périphérique
    """

    def __init__(
        self,
        base_url: str,
        description_path: str = "/rootDesc.xml",
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de base du serveur DLNA
            description_path: Chemin de la description UPnP du périphérique
            timeout: Timeout HTTP en secondes
        """
        self.base_url = base_url.rstrip("/")
        self.description_path = description_path
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._control_url: Optional[str] = None
        self._service_type = UPNP_SERVICE_TYPE_CONTENT

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
            )
        return self._client

    async def _discover_control_url(self, object_id: str) -> str:
        """
        Lit la description du périphérique et localisé le service ContentDirectory.

        Raises:
            BrowseError: Si la description est inaccessible ou sans ContentDirectory
        """
        if self._control_url is not None:
            return self._control_url

        client = self._get_client()
        try:
            response = await client.get(self.description_path)
            response.raise_for_status()
            description = ET.fromstring(response.text)
        except (httpx.HTTPError, ET.ParseError) as e:
            raise BrowseError(object_id, f"description du périphérique inaccessible: {e}") from e

        for service in description.iter(f"{{{DEVICE_NAMESPACE}}}service"):
            service_id = service.findtext(f"{{{DEVICE_NAMESPACE}}}serviceId", "").strip()
            if service_id != UPNP_SERVICE_ID_CONTENT:
                continue

            control_url = service.findtext(f"{{{DEVICE_NAMESPACE}}}controlURL", "").strip()
            if not control_url:
                break
            self._service_type = (
                service.findtext(f"{{{DEVICE_NAMESPACE}}}serviceType", "").strip()
                or UPNP_SERVICE_TYPE_CONTENT
            )
            self._control_url = urljoin(self.base_url + "/", control_url)
            logger.debug("Service ContentDirectory trouvé", control_url=self._control_url)
            return self._control_url

        raise BrowseError(object_id, "service ContentDirectory absent de la description")

    async def browse_raw(self, object_id: str) -> str:
        """
        Exécute l'action Browse et retourne le Result DIDL-Lite brut.

        Args:
            object_id: ObjectID du nœud

        Returns:
            Document DIDL-Lite (chaine vide si le serveur n'en retourne pas)

        Raises:
            BrowseError: En cas d'erreur HTTP, de faute SOAP ou de réponse illisible
        """
        control_url = await self._discover_control_url(object_id)
        body = _SOAP_ENVELOPE.format(
            service_type=self._service_type,
            object_id=escape(object_id),
        )
        headers = {
            "Content-Type": 'text/xml; charset="utf-8"',
            "SOAPAction": f'"{self._service_type}#Browse"',
        }

        client = self._get_client()
        try:
            response = await client.post(control_url, content=body.encode("utf-8"), headers=headers)
            response.raise_for_status()
            envelope = ET.fromstring(response.content)
        except (httpx.HTTPError, ET.ParseError) as e:
            raise BrowseError(object_id, str(e)) from e

        for element in envelope.iter():
            if element.tag == "Result" or element.tag.endswith("}Result"):
                return element.text or ""

        raise BrowseError(object_id, "élément Result absent de la réponse Browse")

    async def browse(self, object_id: str) -> list[ContentNode]:
        """
        Liste les enfants directs d'un nœud.

        Raises:
            BrowseError: Si la navigation échoue
            DidlParseError: Si le Result DIDL-Lite est illisible
        """
        payload = await self.browse_raw(object_id)
        return parse_didl(payload, object_id)

    async def close(self) -> None:
        """Ferme la session HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
