"""
Taxonomie des erreurs de DLNA Updater.

Toutes les erreurs du projet dérivent de DlnaUpdaterError. La politique de
reprise est "ignorer et continuer" au périmètre le plus étroit possible :
- BrowseError / SubfolderError : la branche concernée ne contribue aucun enregistrement
- ExternalApiError : l'enregistrement concerne est ecarte
- TraversalError / PublishError / ConfigurationError : fatales pour l'exécution
Aucune erreur n'est relancée automatiquement.
"""

from typing import Optional


class DlnaUpdaterError(Exception):
    """Erreur de base du projet."""


class ConfigurationError(DlnaUpdaterError):
    """Paramètre obligatoire absent (clé API manquante, etc.)."""


class BrowseError(DlnaUpdaterError):
    """
    Échec d'un appel Browse unique sur le serveur DLNA.

    Attributes:
        object_id: ObjectID du nœud dont la navigation a échoué
    """

    def __init__(self, object_id: str, message: str) -> None:
        self.object_id = object_id
        super().__init__(f"Browse {object_id!r}: {message}")


class DidlParseError(BrowseError):
    """Le document DIDL-Lite retourne par le serveur est illisible."""


class TraversalError(DlnaUpdaterError):
    """La racine de l'arborescence n'a pas pu être parcourue."""

    def __init__(self, object_id: str, message: str) -> None:
        self.object_id = object_id
        super().__init__(f"Parcours impossible depuis {object_id!r}: {message}")


class SubfolderError(TraversalError):
    """Un sous-dossier n'a pas pu être parcouru (branche ignorée)."""


class ExternalApiError(DlnaUpdaterError):
    """
    Échec d'un appel à l'API de recherche de métadonnées.

    Attributes:
        status_code: Code HTTP si la réponse a été reçue, None sinon
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class PublishError(DlnaUpdaterError):
    """Échec de la publication vers le catalogue distant."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
