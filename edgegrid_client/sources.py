"""
Randomness and clock capabilities used by the signer.

Nonce generation and timestamp reads are the only impure steps of signing.
They sit behind these two small interfaces so that callers and tests can
pin both to fixed values.
"""

import datetime
import secrets
from typing import Protocol

from .exceptions import RandomSourceError


class RandomSource(Protocol):
    """Supplies cryptographically secure random bytes."""

    def read(self, size: int) -> bytes:
        ...


class Clock(Protocol):
    """Supplies the current instant as an aware datetime."""

    def now(self) -> datetime.datetime:
        ...


class SystemRandomSource:
    """Random bytes from the operating system CSPRNG."""

    def read(self, size: int) -> bytes:
        try:
            data = secrets.token_bytes(size)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"Could not read {size} random bytes: {e}") from e
        if len(data) != size:
            raise RandomSourceError(f"Short random read: wanted {size}, got {len(data)}")
        return data


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc)
