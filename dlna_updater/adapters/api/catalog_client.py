"""
Client du catalogue distant (addon Orion).

Implemente ICatalogPublisher : POST de la liste enrichie sur /dlna,
authentifie par le header x-orion-api-key. Aucun retry.
"""

from typing import Any, Optional

import httpx

from dlna_updater.core.errors import ConfigurationError, PublishError
from dlna_updater.core.ports import ICatalogPublisher

API_KEY_HEADER = "x-orion-api-key"


class CatalogClient(ICatalogPublisher):
    """
    Client HTTP du catalogue distant.

    Example:
        client = CatalogClient(base_url="https://orion-dlna.vercel.app", api_key="xxx")
        await client.publish([{"title": "Inception", "imdb_id": "tt1375666", ...}])
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def ensure_configured(self) -> None:
        if not self._api_key:
            raise ConfigurationError("Clé API du catalogue manquante (api_key)")

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        self.ensure_configured()

        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={API_KEY_HEADER: self._api_key},
                timeout=self._timeout,
            )
        return self._client

    async def publish(self, payload: list[dict[str, Any]]) -> None:
        """
        Envoie la liste au catalogue.

        Raises:
            PublishError: Erreur réseau ou statut HTTP non 2xx (401/403 compris)
        """
        client = self._get_client()
        try:
            response = await client.post("/dlna", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PublishError(
                f"Publication refusée: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PublishError(f"Publication impossible: {e}") from e

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
