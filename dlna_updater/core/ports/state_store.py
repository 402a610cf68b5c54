"""
Interface port pour la configuration persistée.

Le pipeline ne possède que la clé last_update (empreinte de la dernière
moisson publiée). Les autres clés appartiennent à l'opérateur.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IStateStore(ABC):
    """Contrat de lecture/écriture de l'empreinte de la dernière moisson."""

    @abstractmethod
    async def get_last_update(self) -> Optional[str]:
        """Retourne l'empreinte persistée, None si aucune."""
        ...

    @abstractmethod
    async def set_last_update(self, fingerprint: str) -> None:
        """Persiste une nouvelle empreinte sans toucher aux autres clés."""
        ...
