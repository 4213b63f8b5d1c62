"""
Shared fixtures for EdgeGrid client tests.
"""

import datetime

import pytest

from edgegrid_client import Credentials, EdgeGridSigner
from edgegrid_client.exceptions import RandomSourceError


class FixedClock:
    """Clock pinned to one instant."""

    def __init__(self, instant: datetime.datetime):
        self.instant = instant

    def now(self) -> datetime.datetime:
        return self.instant


class FixedRandomSource:
    """Random source returning a fixed byte string."""

    def __init__(self, data: bytes):
        self.data = data
        self.reads = 0

    def read(self, size: int) -> bytes:
        self.reads += 1
        return self.data[:size]


class BrokenRandomSource:
    """Random source whose entropy read always fails."""

    def read(self, size: int) -> bytes:
        raise RandomSourceError("entropy unavailable")


FIXED_INSTANT = datetime.datetime(2023, 1, 1, tzinfo=datetime.timezone.utc)
FIXED_TIMESTAMP = "20230101T00:00:00+0000"
FIXED_NONCE = "deadbeefcafebabe"


@pytest.fixture
def credentials():
    """Credential set used by the conformance fixture."""
    return Credentials(
        client_token="ct1",
        access_token="at1",
        client_secret="sec1",
        host="example.com",
        scheme="https",
    )


@pytest.fixture
def fixed_clock():
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def fixed_random():
    return FixedRandomSource(bytes.fromhex(FIXED_NONCE))


@pytest.fixture
def signer(credentials, fixed_clock, fixed_random):
    """Signer with pinned time and nonce."""
    return EdgeGridSigner(credentials, random_source=fixed_random, clock=fixed_clock)


@pytest.fixture
def broken_random():
    """Random source that fails every read."""
    return BrokenRandomSource()


@pytest.fixture
def clock_at():
    """Factory for clocks pinned to a given instant."""
    return FixedClock
