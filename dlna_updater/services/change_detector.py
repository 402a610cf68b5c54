"""
Service de détection de changement de la moisson.

L'empreinte est le SHA-256 (hexadécimal) de la concaténation ordonnée, sans
séparateur, des titres bruts de toutes les vidéos. Toute addition, suppression
ou reordonnancement d'un titre change l'empreinte.

La séquence lecture/calcul/écriture n'est pas atomique : deux exécutions
concurrentes du pipeline doivent être sérialisées par l'ordonnanceur externe.
"""

import hashlib

from loguru import logger

from dlna_updater.core.entities import VideoRecord
from dlna_updater.core.ports import IStateStore


def compute_fingerprint(records: list[VideoRecord]) -> str:
    """
    Calcule l'empreinte d'une moisson.

    Args:
        records: Vidéos moissonnées, dans l'ordre

    Returns:
        Empreinte SHA-256 hexadécimale (64 caractères)
    """
    concatenated = "".join(record.filename for record in records)
    return hashlib.sha256(concatenated.encode("utf-8")).hexdigest()


class ChangeDetectorService:
    """
    Compare la moisson courante à la dernière empreinte persistée.

    Example:
        detector = ChangeDetectorService(state_store)
        if await detector.has_changed(records):
            ...  # la nouvelle empreinte est déjà persistée
    """

    def __init__(self, state_store: IStateStore) -> None:
        self._state_store = state_store

    async def has_changed(self, records: list[VideoRecord]) -> bool:
        """
        Indique si la moisson differe de la précédente.

        Persiste la nouvelle empreinte uniquement quand elle differe.

        Args:
            records: Vidéos moissonnées, dans l'ordre

        Returns:
            True si l'empreinte a changé (et a été persistée), False sinon
        """
        fingerprint = compute_fingerprint(records)
        previous = await self._state_store.get_last_update()

        if previous == fingerprint:
            logger.debug("Moisson inchangée", fingerprint=fingerprint)
            return False

        await self._state_store.set_last_update(fingerprint)
        logger.debug("Nouvelle empreinte persistée", fingerprint=fingerprint)
        return True
