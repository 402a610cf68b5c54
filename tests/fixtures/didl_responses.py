"""
Documents UPnP/DLNA de test : description du peripherique, DIDL-Lite, enveloppes SOAP.

Formes calquees sur les reponses de MiniDLNA.
"""

from xml.sax.saxutils import escape

DEVICE_DESCRIPTION = """<?xml version="1.0"?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
  <specVersion><major>1</major><minor>0</minor></specVersion>
  <device>
    <deviceType>urn:schemas-upnp-org:device:MediaServer:1</deviceType>
    <friendlyName>NAS: minidlna</friendlyName>
    <serviceList>
      <service>
        <serviceType>urn:schemas-upnp-org:service:ConnectionManager:1</serviceType>
        <serviceId>urn:upnp-org:serviceId:ConnectionManager</serviceId>
        <controlURL>/ctl/ConnectionMgr</controlURL>
      </service>
      <service>
        <serviceType>urn:schemas-upnp-org:service:ContentDirectory:1</serviceType>
        <serviceId>urn:upnp-org:serviceId:ContentDirectory</serviceId>
        <controlURL>/ctl/ContentDir</controlURL>
      </service>
    </serviceList>
  </device>
</root>
"""

DEVICE_DESCRIPTION_WITHOUT_CONTENT_DIRECTORY = """<?xml version="1.0"?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
  <device>
    <serviceList>
      <service>
        <serviceType>urn:schemas-upnp-org:service:ConnectionManager:1</serviceType>
        <serviceId>urn:upnp-org:serviceId:ConnectionManager</serviceId>
        <controlURL>/ctl/ConnectionMgr</controlURL>
      </service>
    </serviceList>
  </device>
</root>
"""

_DIDL_HEADER = (
    '<DIDL-Lite xmlns:dc="http://purl.org/dc/elements/1.1/" '
    'xmlns:upnp="urn:schemas-upnp-org:metadata-1-0/upnp/" '
    'xmlns="urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/" '
    'xmlns:dlna="urn:schemas-dlna-org:metadata-1-0/">'
)


def didl(*children: str) -> str:
    """Assemble un document DIDL-Lite a partir de fragments container/item."""
    return _DIDL_HEADER + "".join(children) + "</DIDL-Lite>"


def folder(object_id: str, title: str) -> str:
    return (
        f'<container id="{object_id}" parentID="2$15" restricted="1" childCount="1">'
        f"<dc:title>{escape(title)}</dc:title>"
        "<upnp:class>object.container.storageFolder</upnp:class>"
        "</container>"
    )


def video(object_id: str, title: str, url: str, upnp_class: str = "object.item.videoItem") -> str:
    return (
        f'<item id="{object_id}" parentID="2$15" restricted="1">'
        f"<dc:title>{escape(title)}</dc:title>"
        f"<upnp:class>{upnp_class}</upnp:class>"
        f'<res protocolInfo="http-get:*:video/x-matroska:*">{escape(url)}</res>'
        "</item>"
    )


def audio(object_id: str, title: str) -> str:
    return (
        f'<item id="{object_id}" parentID="2$15" restricted="1">'
        f"<dc:title>{escape(title)}</dc:title>"
        "<upnp:class>object.item.audioItem.musicTrack</upnp:class>"
        '<res protocolInfo="http-get:*:audio/mpeg:*">http://192.168.2.104:8200/MediaItems/9.mp3</res>'
        "</item>"
    )


def browse_response(result: str) -> str:
    """Enveloppe SOAP BrowseResponse ; le DIDL-Lite est echappe comme sur le fil."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
        's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">'
        "<s:Body>"
        '<u:BrowseResponse xmlns:u="urn:schemas-upnp-org:service:ContentDirectory:1">'
        f"<Result>{escape(result)}</Result>"
        "<NumberReturned>1</NumberReturned>"
        "<TotalMatches>1</TotalMatches>"
        "<UpdateID>42</UpdateID>"
        "</u:BrowseResponse>"
        "</s:Body>"
        "</s:Envelope>"
    )


ROOT_DIDL = didl(
    folder("2$15$0", "Films"),
    video("2$15$1", "1xbet-promo.mkv", "http://192.168.2.104:8200/MediaItems/1.mkv"),
)

FILMS_DIDL = didl(
    video(
        "2$15$0$0",
        "Movie.Name.2020.1080p.BluRay-RARBG.mkv",
        "http://192.168.2.104:8200/MediaItems/2.mkv",
    ),
)
