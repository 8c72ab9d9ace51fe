"""
Client for the MyScript batch recognition REST API.

Each call is signed: the service expects an HMAC-SHA-512 over the raw
JSON body, keyed with the application key followed by the HMAC key of
the account.

See:
https://developer.myscript.com/support/account/registering-myscript-cloud/#computing-the-hmac-value
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
from urllib.parse import urljoin

import requests

from inkscript.config import DEFAULT_HOST
from inkscript.exceptions import BadResponseError, RecognitionError
from inkscript.models import Result
from inkscript.recognition.request import Request

logger = logging.getLogger(__name__)

BATCH_ENDPOINT = "/api/v4.0/iink/batch"
JIIX_MIME = "application/vnd.myscript.jiix"


class RecognitionClient:
    """
    Signed HTTP client for the batch endpoint.

    Stateless apart from credentials and the HTTP session; safe to share
    between page tasks.

    Attributes:
        app_key: Application key of the account.
        host: Base URL of the service.
        timeout: Per-request timeout in seconds (None = no timeout).

    Example:
        >>> client = RecognitionClient(app_key, hmac_key)
        >>> result = client.batch(prepare_request(stroke_groups=groups))
        >>> result.label
        'Hello world'
    """

    def __init__(
        self,
        app_key: str,
        hmac_key: str,
        host: str = DEFAULT_HOST,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.app_key = app_key
        self._user_key = (app_key + hmac_key).encode("utf-8")
        self.host = host
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return urljoin(self.host, BATCH_ENDPOINT)

    def sign(self, payload: bytes) -> str:
        """Hex HMAC-SHA-512 of the payload."""
        return hmac.new(self._user_key, payload, hashlib.sha512).hexdigest()

    def headers(self, payload: bytes) -> dict[str, str]:
        return {
            "applicationKey": self.app_key,
            "hmac": self.sign(payload),
            "Content-Type": "application/json",
            "Accept": f"application/json, {JIIX_MIME}",
        }

    def batch(self, request: Request) -> Result:
        """
        Perform handwriting recognition for one request.

        Args:
            request: The page request.

        Returns:
            The decoded recognition Result.

        Raises:
            RecognitionError: On network failure or a non-200 response.
            BadResponseError: If a response body cannot be decoded.
        """
        # The signature is computed over exactly the bytes that are sent
        payload = json.dumps(request.to_dict(), separators=(",", ":")).encode("utf-8")

        try:
            response = self.session.post(
                self.endpoint,
                data=payload,
                headers=self.headers(payload),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RecognitionError(f"Request to {self.endpoint} failed: {e}") from e

        if response.status_code != 200:
            raise self._error_from(response)

        try:
            return Result.from_dict(response.json())
        except (ValueError, TypeError, AttributeError) as e:
            raise BadResponseError(
                f"Cannot decode recognition result: {e}",
                status_code=response.status_code,
            ) from e

    def _error_from(self, response: requests.Response) -> RecognitionError:
        status = response.status_code
        try:
            detail = response.json()
        except ValueError as e:
            logger.error("Recognition failed with status %d (undecodable body)", status)
            error = BadResponseError(
                f"Bad response: status {status}, error body not decodable",
                status_code=status,
            )
            error.__cause__ = e
            return error

        logger.error("Recognition failed with status %d: %s", status, detail)
        message = detail.get("message") if isinstance(detail, dict) else None
        text = f"Bad status code {status}"
        if message:
            text = f"{text}: {message}"
        return RecognitionError(text, status_code=status, detail=detail)
