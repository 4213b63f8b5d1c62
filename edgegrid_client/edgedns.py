"""
Recordset API (config-dns v2) binding.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .client import EdgeGridClient
from .exceptions import ResponseFormatError

DEFAULT_TTL = 300

RECORD_TYPE_CNAME = "CNAME"
RECORD_TYPE_TXT = "TXT"


@dataclass
class Recordset:
    name: str
    type: str
    ttl: int = DEFAULT_TTL
    rdata: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "Recordset":
        try:
            return cls(
                name=data['name'],
                type=data['type'],
                ttl=int(data.get('ttl', DEFAULT_TTL)),
                rdata=list(data.get('rdata') or []),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"invalid recordset: {e!r}") from e

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Metadata:
    last_page: int = 0
    page: int = 0
    page_size: int = 0
    show_all: bool = False
    total_elements: int = 0

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Metadata":
        return cls(
            last_page=data.get('lastPage', 0),
            page=data.get('page', 0),
            page_size=data.get('pageSize', 0),
            show_all=data.get('showAll', False),
            total_elements=data.get('totalElements', 0),
        )


@dataclass
class RecordsetResponse:
    metadata: Metadata
    recordsets: List[Recordset]


class EdgeDNSClient:
    """CRUD operations on the recordsets of a zone."""

    def __init__(self, client: EdgeGridClient):
        self.client = client

    @staticmethod
    def _names_path(zone: str, name: str, record_type: Optional[str] = None) -> str:
        path = f"/config-dns/v2/zones/{zone}/names/{name}/types"
        if record_type:
            path += "/" + record_type
        return path

    def list_recordsets(self, zone: str, page: Optional[int] = None, page_size: Optional[int] = None,
                        search: Optional[str] = None, show_all: Optional[bool] = None,
                        sort_by: Optional[str] = None, types: Optional[str] = None) -> RecordsetResponse:
        """List the recordsets of ``zone``; unset query arguments are left out."""
        params = {
            'page': page,
            'pageSize': page_size,
            'search': search,
            'showAll': None if show_all is None else str(show_all).lower(),
            'sortBy': sort_by,
            'types': types,
        }
        data = self.client.do_json('GET', f"/config-dns/v2/zones/{zone}/recordsets", params=params)
        if not isinstance(data, dict):
            raise ResponseFormatError("recordset listing must be an object")
        return RecordsetResponse(
            metadata=Metadata.from_json(data.get('metadata') or {}),
            recordsets=[Recordset.from_json(r) for r in data.get('recordsets') or []],
        )

    def retrieve_recordset_types(self, zone: str, name: str) -> List[str]:
        data = self.client.do_json('GET', self._names_path(zone, name))
        return list((data or {}).get('types') or [])

    def retrieve_recordset(self, zone: str, name: str, record_type: str) -> Recordset:
        return Recordset.from_json(self.client.do_json('GET', self._names_path(zone, name, record_type)))

    def create_recordset(self, zone: str, name: str, record_type: str, recordset: Recordset) -> Recordset:
        data = self.client.do_json('POST', self._names_path(zone, name, record_type), recordset.to_json())
        return Recordset.from_json(data)

    def update_recordset(self, zone: str, name: str, record_type: str, recordset: Recordset) -> Recordset:
        # PUT bodies are not digested into the signature
        data = self.client.do_json('PUT', self._names_path(zone, name, record_type), recordset.to_json())
        return Recordset.from_json(data)

    def delete_recordset(self, zone: str, name: str, record_type: str):
        self.client.do_json('DELETE', self._names_path(zone, name, record_type))
