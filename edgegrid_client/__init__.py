"""
EdgeGrid Client Library

Signs HTTP API requests with the EG1-HMAC-SHA256 ("EdgeGrid") scheme,
verifies presented authorization headers, and wraps the zone, recordset,
firewall and Site Shield APIs on top of the signed transport.

Example usage:
    from edgegrid_client import EdgeGridClient, FastDNSClient, load_edgerc

    client = EdgeGridClient(load_edgerc("~/.edgerc", "default"))
    zone = FastDNSClient(client).get_zone("example.com")
"""

from .auth import (
    AuthHeaderInfo,
    EdgeGridSigner,
    parse_header,
    sign,
    verify,
)
from .client import EdgeGridClient
from .credentials import Credentials, load_edgerc
from .edgedns import EdgeDNSClient, Recordset
from .exceptions import (
    EdgeGridError,
    InvalidCredentialSetError,
    RandomSourceError,
    MalformedHeaderError,
    MissingKeyError,
    VerificationError,
    ConfigurationError,
    InputTooLargeError,
    HTTPError,
    ResponseFormatError
)
from .fastdns import FakeFastDNS, FastDNSClient, ZoneResponse
from .firewall import FirewallClient
from .siteshield import SiteShieldClient
from .sources import SystemClock, SystemRandomSource

__version__ = "1.0.0"
__all__ = [
    "AuthHeaderInfo",
    "EdgeGridSigner",
    "parse_header",
    "sign",
    "verify",
    "EdgeGridClient",
    "Credentials",
    "load_edgerc",
    "EdgeDNSClient",
    "Recordset",
    "FastDNSClient",
    "FakeFastDNS",
    "ZoneResponse",
    "FirewallClient",
    "SiteShieldClient",
    "SystemClock",
    "SystemRandomSource",
    "EdgeGridError",
    "InvalidCredentialSetError",
    "RandomSourceError",
    "MalformedHeaderError",
    "MissingKeyError",
    "VerificationError",
    "ConfigurationError",
    "InputTooLargeError",
    "HTTPError",
    "ResponseFormatError"
]
