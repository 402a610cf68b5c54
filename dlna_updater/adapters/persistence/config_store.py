"""
Fichier de configuration JSON persiste (config.json).

Le document contient les clés de l'opérateur (tmdb_key, api_key), lues
seulement, et la clé last_update possédée par le détecteur de changement.

Les lectures/écritures disque passent par run_in_executor pour ne pas
bloquer la boucle asyncio.
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Any, Optional

from dlna_updater.core.errors import ConfigurationError
from dlna_updater.core.ports import IStateStore

LAST_UPDATE_KEY = "last_update"


class JsonConfigStore(IStateStore):
    """
    Document clé/valeur JSON sur disque.

    Un fichier absent est lu comme un document vide. Les écritures sont
    atomiques (fichier temporaire puis remplacement) et conservent toutes
    les clés existantes.

    Example:
        store = JsonConfigStore(Path("config.json"))
        tmdb_key = store.get("tmdb_key")
        await store.set_last_update("3f2a...")
    """

    def __init__(self, path: Path) -> None:
        """
        Args:
            path: Chemin du fichier JSON (créé à la première écriture)
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> dict[str, Any]:
        """
        Lit le document complet (synchrone).

        Raises:
            ConfigurationError: Si le fichier n'est pas un JSON valide
        """
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Fichier d'état illisible ({self._path}): {e}") from e
        return data if isinstance(data, dict) else {}

    def write(self, data: dict[str, Any]) -> None:
        """Écrit le document complet de façon atomique (synchrone)."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4, ensure_ascii=False)
        os.replace(tmp_path, self._path)

    def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        """Lit une clé du document (valeurs de l'opérateur, en lecture seule)."""
        return self.read().get(key, default)

    def _update(self, key: str, value: Any) -> None:
        data = self.read()
        data[key] = value
        self.write(data)

    async def get_last_update(self) -> Optional[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get, LAST_UPDATE_KEY)

    async def set_last_update(self, fingerprint: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._update, LAST_UPDATE_KEY, fingerprint)
