"""
Credential sets and the .edgerc loader.
"""

import configparser
import os
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_EDGERC_PATH,
    DEFAULT_EDGERC_SECTION,
    DEFAULT_SCHEME,
    EDGERC_REQUIRED_KEYS,
)
from .exceptions import ConfigurationError, InvalidCredentialSetError


@dataclass(frozen=True)
class Credentials:
    """
    Token, secret and host tuple that identifies and authenticates a caller.

    The client secret is excluded from ``repr`` so it never ends up in logs
    or tracebacks.
    """

    client_token: str
    access_token: str
    client_secret: str = field(repr=False)
    host: str
    scheme: str = DEFAULT_SCHEME

    def validate(self):
        """
        Check that every field is present.

        Raises:
            InvalidCredentialSetError: naming the first empty field
        """
        for name in ("client_token", "access_token", "client_secret", "host", "scheme"):
            if not getattr(self, name):
                raise InvalidCredentialSetError(f"{name} cannot be empty")

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"


def _normalize_host(host: str) -> str:
    for prefix in ("https://", "http://"):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host.rstrip('/')


def load_edgerc(path: str = DEFAULT_EDGERC_PATH,
                section: str = DEFAULT_EDGERC_SECTION,
                scheme: str = DEFAULT_SCHEME) -> Credentials:
    """
    Load a credential set from an .edgerc INI file.

    Args:
        path: File path; ``~`` is expanded
        section: INI section holding the credentials
        scheme: Transport scheme for the returned credentials

    Returns:
        Validated Credentials

    Raises:
        ConfigurationError: If the file, section or a required key is missing
    """
    filename = os.path.expanduser(path)
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(filename, encoding='utf-8') as f:
            parser.read_file(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read {filename}: {e.strerror}") from e
    except configparser.Error as e:
        raise ConfigurationError(f"cannot parse {filename}: {e.__class__.__name__}") from e

    if not parser.has_section(section):
        raise ConfigurationError(f"no section {section!r} in {filename}")

    values = {}
    for key in EDGERC_REQUIRED_KEYS:
        value = parser.get(section, key, fallback="").strip()
        if not value:
            raise ConfigurationError(f"missing {key} in section {section!r}")
        values[key] = value

    credentials = Credentials(
        client_token=values['client_token'],
        access_token=values['access_token'],
        client_secret=values['client_secret'],
        host=_normalize_host(values['host']),
        scheme=scheme,
    )
    try:
        credentials.validate()
    except InvalidCredentialSetError as e:
        raise ConfigurationError(str(e)) from e
    return credentials
