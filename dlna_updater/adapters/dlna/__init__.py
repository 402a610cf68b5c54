"""Adaptateurs DLNA/UPnP : client ContentDirectory et parser DIDL-Lite."""

from dlna_updater.adapters.dlna.content_directory_client import ContentDirectoryClient
from dlna_updater.adapters.dlna.didl_parser import parse_didl

__all__ = ["ContentDirectoryClient", "parse_didl"]
