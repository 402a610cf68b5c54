"""
Constantes globales pour DLNA Updater.

Ce module contient:
- Les classes UPnP reconnues lors du parcours de l'arborescence
- L'identifiant du service ContentDirectory
- Les marqueurs de release à retirer des titres
- Les motifs de contenus indésirables
"""

# Classes UPnP (prefixes : object.item.videoItem.movie est une vidéo)
UPNP_CLASS_CONTAINER = "object.container"
UPNP_CLASS_VIDEO_ITEM = "object.item.videoItem"

UPNP_SERVICE_ID_CONTENT = "urn:upnp-org:serviceId:ContentDirectory"
UPNP_SERVICE_TYPE_CONTENT = "urn:schemas-upnp-org:service:ContentDirectory:1"

# Namespaces XML
DIDL_NAMESPACE = "urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
UPNP_NAMESPACE = "urn:schemas-upnp-org:metadata-1-0/upnp/"
DEVICE_NAMESPACE = "urn:schemas-upnp-org:device-1-0"

# Marqueurs de release retirés des titres (résolution, codec, source, groupes, audio).
# Les titres sont déjà en minuscules et "." / "-" remplacés par des espaces.
RELEASE_TAGS = (
    "720p",
    "1080p",
    "bluray",
    "full hd",
    "5 1",
    "x256",
    "x265",
    "rarbg",
    "comandotorrents",
    "x264",
    "web dl",
    "webdl",
    "comando to",
    "www bludv com",
)

# Promotions de sites de paris déguisées en vidéos
UNWANTED_PATTERNS = ("1xbet",)
