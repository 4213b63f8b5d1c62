"""
Constants for the EdgeGrid client library.
Wire-level values shared by the signer, the parser and the HTTP layer.
"""

# Authorization header (matching the EG1 wire format)
HEADER_AUTHORIZATION = "Authorization"
AUTH_ALGORITHM = "EG1-HMAC-SHA256"

# Field order inside the authorization header is part of the contract
AUTH_HEADER_KEYS = (
    "client_token",
    "access_token",
    "timestamp",
    "nonce",
    "signature",
)

# strftime format for UTC timestamps, e.g. 20230101T00:00:00+0000
TIMESTAMP_FORMAT = "%Y%m%dT%H:%M:%S+0000"

# Nonce size in random bytes (hex-encoded to 16 characters)
NONCE_SIZE = 8

DEFAULT_SCHEME = "https"

# Credential file defaults
DEFAULT_EDGERC_PATH = "~/.edgerc"
DEFAULT_EDGERC_SECTION = "default"
EDGERC_REQUIRED_KEYS = ("client_token", "client_secret", "access_token", "host")

# Default client configuration values
DEFAULT_CONFIG = {
    'timeout': 30,                  # HTTP timeout in seconds
    'max_body_size': 131072,        # 128KB request body limit
    'accept': 'application/json',   # Accept header value
}

MAX_BODY_SIZE = 128 * 1024
