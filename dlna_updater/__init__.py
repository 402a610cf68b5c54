"""
DLNA Updater - Catalogue des vidéos d'un serveur multimédia DLNA.

Ce package parcourt l'arborescence ContentDirectory d'un serveur DLNA/UPnP,
identifie chaque vidéo via l'API TMDB et publie la liste enrichie vers le
catalogue Orion, uniquement lorsque l'ensemble des fichiers a changé.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (normalisation, moisson, résolution, publication)
- adapters/ : Couche infrastructure (CLI, client DLNA, clients HTTP, fichier d'état)
"""

__version__ = "0.1.0"
