"""
EdgeGrid HTTP client.

This module signs outgoing requests with the EG1-HMAC-SHA256 scheme and
issues them over a requests session. Resource clients build on
``EdgeGridClient.do_json``.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests

from .auth import EdgeGridSigner
from .constants import DEFAULT_CONFIG, HEADER_AUTHORIZATION
from .credentials import Credentials
from .exceptions import (
    ConfigurationError,
    HTTPError,
    InputTooLargeError,
    InvalidCredentialSetError,
    ResponseFormatError,
)

logger = logging.getLogger(__name__)


class EdgeGridClient:
    """
    HTTP client for making EdgeGrid-authenticated requests.

    Every request is signed right before it is sent; a signing failure
    aborts the request.
    """

    def __init__(self, credentials: Credentials, signer: Optional[EdgeGridSigner] = None, **config):
        """
        Initialize EdgeGrid client.

        Args:
            credentials: Credential set for the target host
            signer: Signer to use; one is built from ``credentials`` when omitted
            **config: Configuration options (timeout, max_body_size, accept)
        """
        self.credentials = credentials
        self.signer = signer or EdgeGridSigner(credentials)

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.session = requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        try:
            self.credentials.validate()
        except InvalidCredentialSetError as e:
            raise ConfigurationError(str(e)) from e

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

        if self.config['max_body_size'] <= 0:
            raise ConfigurationError("max_body_size must be positive")

    @property
    def base_url(self) -> str:
        return self.credentials.base_url

    def _check_body_size(self, body: bytes):
        """Check if the request body exceeds the size limit."""
        if len(body) > self.config['max_body_size']:
            raise InputTooLargeError(
                f"Body size {len(body)} exceeds limit {self.config['max_body_size']}"
            )

    def _prepare_request_body(self, json_data=None, data=None) -> bytes:
        """Prepare request body for signing."""
        if json_data is not None:
            return json.dumps(json_data, separators=(',', ':')).encode('utf-8')
        elif data is not None:
            if isinstance(data, str):
                return data.encode('utf-8')
            elif isinstance(data, bytes):
                return data
            else:
                return str(data).encode('utf-8')
        else:
            return b''

    @staticmethod
    def _build_path(path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Normalize the path and append the query string; the result is what gets signed."""
        if not path.startswith('/'):
            path = '/' + path
        if params:
            query = urlencode({k: v for k, v in params.items() if v is not None}, doseq=True)
            if query:
                path = f"{path}?{query}"
        return path

    def request(self, method: str, path: str, json=None, data=None,
                params: Optional[Dict[str, Any]] = None, **kwargs) -> requests.Response:
        """
        Make an authenticated HTTP request.

        Args:
            method: HTTP method
            path: URL path on the credential host
            json: JSON data to send
            data: Raw data to send
            params: Query parameters; included in the signed path
            **kwargs: Additional requests arguments

        Returns:
            requests.Response with a 2xx status

        Raises:
            InputTooLargeError: If the body exceeds ``max_body_size``
            HTTPError: If the request fails or the status is not 2xx
        """
        method = method.upper()
        full_path = self._build_path(path, params)
        body = self._prepare_request_body(json, data)
        self._check_body_size(body)

        headers = dict(kwargs.pop('headers', None) or {})
        headers.update({
            HEADER_AUTHORIZATION: self.signer.sign(method, full_path, body),
            'Accept': self.config['accept'],
        })
        if body:
            headers['Content-Type'] = 'application/json'
            kwargs['data'] = body

        url = self.base_url + full_path
        kwargs.setdefault('timeout', self.config['timeout'])

        try:
            response = self.session.request(method, url, headers=headers, **kwargs)
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", method, full_path, response.status_code)

        if not 200 <= response.status_code < 300:
            raise HTTPError(response.text or f"HTTP {response.status_code}",
                            status_code=response.status_code, body=response.text)
        return response

    def do_json(self, method: str, path: str, payload=None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send ``payload`` as JSON and decode the JSON response.

        Returns:
            Decoded response, or None for an empty response body

        Raises:
            ResponseFormatError: If the response body is not valid JSON
        """
        response = self.request(method, path, json=payload, params=params)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseFormatError(f"Invalid JSON response from {path}: {e}") from e

    def get(self, path: str, **kwargs) -> requests.Response:
        """Make authenticated GET request."""
        return self.request('GET', path, **kwargs)

    def post(self, path: str, json=None, data=None, **kwargs) -> requests.Response:
        """Make authenticated POST request."""
        return self.request('POST', path, json=json, data=data, **kwargs)

    def put(self, path: str, json=None, data=None, **kwargs) -> requests.Response:
        """Make authenticated PUT request."""
        return self.request('PUT', path, json=json, data=data, **kwargs)

    def delete(self, path: str, **kwargs) -> requests.Response:
        """Make authenticated DELETE request."""
        return self.request('DELETE', path, **kwargs)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
