"""
Firewall Rules Manager binding: CIDR blocks and services.
"""

import datetime
import enum
import ipaddress
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .client import EdgeGridClient
from .exceptions import ResponseFormatError

BASE_PATH = "/firewall-rules-manager/v1/"

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class LastAction(str, enum.Enum):
    OTHER = "other"
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: str) -> "LastAction":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass
class Service:
    id: int
    name: str
    description: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Service":
        try:
            return cls(
                id=int(data['serviceId']),
                name=data['serviceName'],
                description=data.get('description', ""),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"invalid service: {e!r}") from e


def _parse_date(value: Optional[str]) -> Optional[datetime.date]:
    if not value:
        return None
    return datetime.date.fromisoformat(value)


@dataclass
class CIDRBlock:
    id: int
    service_id: int
    service_name: str
    cidr: IPNetwork
    ports: List[int]
    creation_date: Optional[datetime.date]
    effective_date: Optional[datetime.date]
    change_date: Optional[datetime.date]
    min_ip: IPAddress
    max_ip: IPAddress
    last_action: LastAction

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CIDRBlock":
        """Decode one cidr-blocks entry; the mask arrives separately as e.g. '/24'."""
        try:
            return cls(
                id=int(data['cidrId']),
                service_id=int(data['serviceId']),
                service_name=data.get('serviceName', ""),
                cidr=ipaddress.ip_network(data['cidr'] + data['cidrMask'], strict=False),
                ports=[int(p) for p in data['port'].split(',')],
                creation_date=_parse_date(data.get('creationDate')),
                effective_date=_parse_date(data.get('effectiveDate')),
                change_date=_parse_date(data.get('changeDate')),
                min_ip=ipaddress.ip_address(data['minIp']),
                max_ip=ipaddress.ip_address(data['maxIp']),
                last_action=LastAction.parse(data.get('lastAction', "")),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"invalid CIDR block: {e!r}") from e


class FirewallClient:
    """Read access to the firewall CIDR block list."""

    def __init__(self, client: EdgeGridClient):
        self.client = client

    def get_cidr_blocks(self) -> List[CIDRBlock]:
        data = self.client.do_json('GET', BASE_PATH + "cidr-blocks") or []
        return [CIDRBlock.from_json(block) for block in data]

    def get_service(self, service_id: int) -> Service:
        return Service.from_json(self.client.do_json('GET', f"{BASE_PATH}services/{service_id}"))
