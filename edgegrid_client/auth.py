"""
EdgeGrid request signing and verification.

Implements the EG1-HMAC-SHA256 authorization scheme:

    EG1-HMAC-SHA256 client_token=T;access_token=A;timestamp=S;nonce=N;signature=SIG

The signature is a two-stage HMAC-SHA256. The client secret signs only the
timestamp, producing a signing key; the signing key then signs the
tab-joined canonical request (method, scheme, host, path, signed headers,
content digest, header prefix).
"""

import base64
import datetime
import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from .constants import AUTH_ALGORITHM, AUTH_HEADER_KEYS, NONCE_SIZE, TIMESTAMP_FORMAT
from .credentials import Credentials
from .exceptions import (
    EdgeGridError,
    MalformedHeaderError,
    MissingKeyError,
    VerificationError,
)
from .sources import Clock, RandomSource, SystemClock, SystemRandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthHeaderInfo:
    """Fields of a parsed authorization header plus the verbatim header."""

    client_token: str
    access_token: str
    timestamp: str
    nonce: str
    signature: str
    full_header: str


def parse_header(header: str) -> AuthHeaderInfo:
    """
    Split an authorization header into its five fields.

    Args:
        header: Raw Authorization header value

    Returns:
        AuthHeaderInfo carrying a verbatim copy of ``header``

    Raises:
        MalformedHeaderError: Wrong scheme, wrong segment count or a segment without '='
        MissingKeyError: A field is misnamed or out of order
    """
    algorithm, sep, rest = header.partition(" ")
    if not sep or algorithm != AUTH_ALGORITHM:
        raise MalformedHeaderError("Invalid auth header format")

    segments = rest.split(";")
    if len(segments) != len(AUTH_HEADER_KEYS):
        raise MalformedHeaderError("Invalid auth header format")

    parsed = {}
    for key, segment in zip(AUTH_HEADER_KEYS, segments):
        name, sep, value = segment.partition("=")
        if not sep:
            raise MalformedHeaderError("Invalid auth header format")
        if name != key:
            raise MissingKeyError(key)
        parsed[key] = value

    return AuthHeaderInfo(full_header=header, **parsed)


def content_digest(method: str, body: bytes) -> str:
    """Base64 SHA-256 of the body for non-empty POST requests, else empty."""
    if method == "POST" and body:
        return base64.b64encode(hashlib.sha256(body).digest()).decode('ascii')
    return ""


def canonical_signing_string(method: str, scheme: str, host: str, path: str,
                             body: bytes, prefix: str, signed_headers: str = "") -> str:
    """Build the tab-joined request representation signed in the second HMAC stage."""
    method = method.upper()
    if not path.startswith("/"):
        path = "/" + path
    return "\t".join([
        method,
        scheme,
        host,
        path,
        signed_headers,
        content_digest(method, body),
        prefix,
    ])


def auth_header_prefix(credentials: Credentials, timestamp: str, nonce: str,
                       algorithm: str = AUTH_ALGORITHM) -> str:
    """Render the header up to and including the ';' before ``signature=``."""
    return (
        f"{algorithm} client_token={credentials.client_token};"
        f"access_token={credentials.access_token};"
        f"timestamp={timestamp};nonce={nonce};"
    )


def _hmac_b64(key: bytes, message: bytes) -> str:
    return base64.b64encode(hmac.new(key, message, hashlib.sha256).digest()).decode('ascii')


def make_signing_key(client_secret: str, timestamp: str) -> str:
    """First stage: HMAC the timestamp with the client secret."""
    return _hmac_b64(client_secret.encode('utf-8'), timestamp.encode('utf-8'))


def make_signature(signing_key: str, signing_string: str) -> str:
    """Second stage: HMAC the canonical request with the signing key."""
    return _hmac_b64(signing_key.encode('utf-8'), signing_string.encode('utf-8'))


def make_nonce(source: RandomSource) -> str:
    """Hex-encode NONCE_SIZE random bytes."""
    return source.read(NONCE_SIZE).hex()


def make_timestamp(clock: Clock, fmt: str = TIMESTAMP_FORMAT) -> str:
    """Format the clock's current instant in UTC."""
    return clock.now().astimezone(datetime.timezone.utc).strftime(fmt)


def parse_timestamp(timestamp: str) -> datetime.datetime:
    """Parse a header timestamp back into an aware datetime."""
    return datetime.datetime.strptime(timestamp, "%Y%m%dT%H:%M:%S%z")


class EdgeGridSigner:
    """
    Signs and checks requests for one credential set.

    The signer keeps no per-request state, so one instance can be shared
    between threads. Randomness and time come from the injected sources.
    """

    algorithm = AUTH_ALGORITHM
    # No additional headers are bound into the signature
    signed_headers = ""
    timestamp_format = TIMESTAMP_FORMAT

    def __init__(self, credentials: Credentials,
                 random_source: Optional[RandomSource] = None,
                 clock: Optional[Clock] = None):
        """
        Initialize signer.

        Args:
            credentials: Credential set used for every request
            random_source: Nonce entropy; defaults to the OS CSPRNG
            clock: Timestamp source; defaults to the UTC wall clock
        """
        self.credentials = credentials
        self.random_source = random_source or SystemRandomSource()
        self.clock = clock or SystemClock()

    def sign(self, method: str, path: str, body: bytes = b"",
             timestamp: Optional[str] = None, nonce: Optional[str] = None) -> str:
        """
        Generate the Authorization header value for a request.

        Args:
            method: HTTP method, any case
            path: Request path including any query string
            body: Raw request body
            timestamp: Fixed timestamp; generated when omitted
            nonce: Fixed nonce; generated when omitted

        Returns:
            Complete EG1-HMAC-SHA256 header value

        Raises:
            InvalidCredentialSetError: If the credential set is incomplete
            RandomSourceError: If a nonce is needed and entropy cannot be read
        """
        self.credentials.validate()

        if timestamp is None:
            timestamp = make_timestamp(self.clock, self.timestamp_format)
        if nonce is None:
            nonce = make_nonce(self.random_source)

        prefix = auth_header_prefix(self.credentials, timestamp, nonce, self.algorithm)
        signing_string = canonical_signing_string(
            method,
            self.credentials.scheme,
            self.credentials.host,
            path,
            body or b"",
            prefix,
            self.signed_headers,
        )
        signing_key = make_signing_key(self.credentials.client_secret, timestamp)
        return f"{prefix}signature={make_signature(signing_key, signing_string)}"

    def check_request(self, method: str, path: str, body: bytes, info: AuthHeaderInfo,
                      max_skew: Optional[float] = None) -> bool:
        """
        Check a parsed header against a request.

        Reuses the presented nonce and timestamp, recomputes the whole header
        and compares it with the presented one in constant time.

        Args:
            method: HTTP method of the request
            path: Request path of the request
            body: Raw body of the request
            info: Parsed presented header
            max_skew: If set, reject timestamps further than this many seconds from now

        Returns:
            True if the header is valid for this request

        Raises:
            VerificationError: If the expected header could not be computed
        """
        if max_skew is not None and not self._timestamp_fresh(info.timestamp, max_skew):
            return False

        try:
            expected = self.sign(method, path, body, timestamp=info.timestamp, nonce=info.nonce)
        except EdgeGridError as e:
            logger.error("Unexpected error while checking request %s %s: %s",
                         method.upper(), path, e)
            raise VerificationError(f"cannot verify request: {e}") from e

        return hmac.compare_digest(expected.encode('utf-8'), info.full_header.encode('utf-8'))

    def _timestamp_fresh(self, timestamp: str, max_skew: float) -> bool:
        try:
            ts = parse_timestamp(timestamp)
        except ValueError:
            return False
        now = self.clock.now().astimezone(datetime.timezone.utc)
        diff = abs((now - ts).total_seconds())
        return diff <= max_skew


def sign(credentials: Credentials, method: str, path: str, body: bytes = b"") -> str:
    """Sign a request with a fresh nonce and the current time."""
    return EdgeGridSigner(credentials).sign(method, path, body)


def verify(credentials: Credentials, method: str, path: str, body: bytes,
           info: AuthHeaderInfo, max_skew: Optional[float] = None) -> bool:
    """Check a parsed header against a request; see EdgeGridSigner.check_request."""
    return EdgeGridSigner(credentials).check_request(method, path, body, info, max_skew=max_skew)
