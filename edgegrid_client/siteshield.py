"""
Site Shield binding: maps of the CIDRs that reach an origin.
"""

import datetime
import enum
import ipaddress
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .client import EdgeGridClient
from .exceptions import ResponseFormatError
from .firewall import IPNetwork

BASE_PATH = "/siteshield/v1/"

_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


class Service(str, enum.Enum):
    OTHER = "other"
    SCRIPT = "script"
    ESSL = "ESSL"
    FREE_FLOW = "FreeFlow"

    @classmethod
    def parse(cls, code: str) -> "Service":
        return _SERVICE_CODES.get(code, cls.OTHER)


_SERVICE_CODES = {
    "C": Service.SCRIPT,
    "S": Service.ESSL,
    "W": Service.FREE_FLOW,
}


def _parse_rfc3339(value: str) -> datetime.datetime:
    match = _RFC3339_RE.match(value)
    if not match:
        raise ValueError(f"invalid RFC 3339 time {value!r}")
    base, fraction, offset = match.groups()
    # fromisoformat before Python 3.11 takes neither a 'Z' suffix nor
    # fractions of other than 3 or 6 digits
    if offset in ("Z", "z"):
        offset = "+00:00"
    fraction = (fraction or "").ljust(6, "0")[:6]
    return datetime.datetime.fromisoformat(f"{base}.{fraction}{offset}")


@dataclass
class Map:
    id: int
    acknowledge_required_by: datetime.datetime
    acknowledged: bool = False
    acknowledged_by: str = ""
    alias: str = ""
    contacts: List[str] = field(default_factory=list)
    current_cidrs: List[IPNetwork] = field(default_factory=list)
    is_shared: bool = False
    latest_ticket_id: int = 0
    proposed_cidrs: List[IPNetwork] = field(default_factory=list)
    rule_name: str = ""
    service: Service = Service.OTHER
    sure_route_name: str = ""
    type: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Map":
        try:
            return cls(
                id=int(data['id']),
                acknowledge_required_by=_parse_rfc3339(data['acknowledgeRequiredBy']),
                acknowledged=bool(data.get('acknowledged', False)),
                acknowledged_by=data.get('acknowledgedBy') or "",
                alias=data.get('mapAlias') or "",
                contacts=list(data.get('contacts') or []),
                current_cidrs=[ipaddress.ip_network(c, strict=False) for c in data.get('currentCidrs') or []],
                is_shared=bool(data.get('shared', False)),
                latest_ticket_id=int(data.get('latestTicketId') or 0),
                proposed_cidrs=[ipaddress.ip_network(c, strict=False) for c in data.get('proposedCidrs') or []],
                rule_name=data.get('ruleName') or "",
                service=Service.parse(data.get('service') or ""),
                sure_route_name=data.get('sureRouteName') or "",
                type=data.get('type') or "",
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"invalid Site Shield map: {e!r}") from e


class SiteShieldClient:
    """Read access to the account's Site Shield maps."""

    def __init__(self, client: EdgeGridClient):
        self.client = client

    def get_maps(self) -> List[Map]:
        data = self.client.do_json('GET', BASE_PATH + "maps") or {}
        return [Map.from_json(m) for m in data.get('siteShieldMaps') or []]

    def get_map(self, map_id: int) -> Map:
        return Map.from_json(self.client.do_json('GET', f"{BASE_PATH}maps/{map_id}"))
