"""
Zone API (config-dns v1) binding and an in-memory stand-in.
"""

import copy
import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .client import EdgeGridClient
from .exceptions import ResponseFormatError

ZONE_PATH = "/config-dns/v1/zones/"


def _record_key(record: Any) -> str:
    return json.dumps(record, sort_keys=True, separators=(',', ':'))


@dataclass
class ZoneResponse:
    """A zone document and the token the server issued for it."""

    token: str = ""
    zone: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> "ZoneResponse":
        if not isinstance(data, dict) or not isinstance(data.get('zone', {}), dict):
            raise ResponseFormatError("zone response must be an object with a 'zone' object")
        return cls(token=data.get('token', ""), zone=data.get('zone', {}))

    def to_json(self) -> Dict[str, Any]:
        return {'token': self.token, 'zone': self.zone}

    @property
    def name(self) -> Optional[str]:
        return self.zone.get('name')

    def sort(self):
        """
        Put every record list into a consistent order.

        Servers return some record types in random order; sorting lets
        callers compare two zones with ``==``.
        """
        self.zone = {
            key: sorted(value, key=_record_key) if isinstance(value, list) else value
            for key, value in self.zone.items()
        }


class FastDNSClient:
    """Reads and replaces whole zones."""

    def __init__(self, client: EdgeGridClient):
        self.client = client

    def get_zone(self, name: str) -> ZoneResponse:
        """Return the current zone with each record list sorted."""
        zr = ZoneResponse.from_json(self.client.do_json('GET', ZONE_PATH + name))
        zr.sort()
        return zr

    def set_zone(self, name: str, zr: ZoneResponse):
        """Replace the zone; the token must be the one returned by get_zone."""
        self.client.do_json('POST', ZONE_PATH + name, zr.to_json())


class FakeFastDNS:
    """
    In-memory zone store with the same interface as FastDNSClient.

    Unknown zones are created from ``default_zone_response`` on first read.
    """

    def __init__(self, default_zone_response: Optional[ZoneResponse] = None):
        self.default_zone_response = default_zone_response or ZoneResponse()
        self._zones: Dict[str, ZoneResponse] = {}

    def get_zone(self, name: str) -> ZoneResponse:
        zone = self._zones.get(name)
        if zone is None:
            zone = copy.deepcopy(self.default_zone_response)
            zone.zone['name'] = name
            self._zones[name] = zone
        return zone

    def set_zone(self, name: str, zr: ZoneResponse):
        stored = copy.deepcopy(zr)
        # Callers detect changes by the token, so every write issues a new one
        stored.token = format(time.time_ns(), 'x')
        self._zones[name] = stored
