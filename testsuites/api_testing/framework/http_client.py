"""
================================================================================
Base API Client with Allure Integration
================================================================================

Uniform request dispatch and response interpretation for all typed clients.

    - GET / POST / PUT / DELETE returning validated, typed values
    - Raw variants returning the untouched httpx.Response
    - Response classification into a closed error taxonomy (see errors.py)
    - Allure reporting with cURL command generation and secret masking

Every call is a single attempt: failures surface to the caller immediately.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import allure
import httpx
from allure_commons.types import AttachmentType
from loguru import logger as default_logger
from pydantic import TypeAdapter, ValidationError

from storefront_tools.json_helper import to_jsonable
from storefront_tools.reporting import MASKED, SENSITIVE_HEADERS, build_curl_command

from .builders import PreparedRequest
from .errors import (
    ApiClientError,
    DeserializationError,
    TransportError,
    classify_status,
)


# Maximum response length to include in Allure reports
MAX_RESPONSE_LENGTH = 3000

SENSITIVE_BODY_KEYS = ("password", "secret", "token", "api_key", "authorization", "session")


def type_name(response_type: Any) -> str:
    """Readable name of an expected response type (``List[Product]``)."""
    if isinstance(response_type, type):
        return response_type.__name__
    return str(response_type).replace("typing.", "")


class BaseClient:
    """
    Base HTTP client shared by all typed API clients.

    Owns one httpx.Client (base URL and timeout fixed at construction) and
    releases it exactly once on close().

    Usage:
        >>> session = httpx.Client(base_url="http://localhost:5000", timeout=30)
        >>> with BaseClient(session) as client:
        ...     product = client.get("/api/products/1", response_type=Product)
        ...     raw = client.get_raw("/api/analytics")

    ``response_type`` defaults to ``typing.Any``, meaning "no particular
    shape": the parsed JSON (or text, or None for an empty body) is returned
    without validation.
    """

    def __init__(self, session: httpx.Client, logger: Any = None) -> None:
        """
        Args:
            session: Transport handle, configured with base_url and timeout
            logger: Per-test logger handle; the global loguru logger if None
        """
        if session is None:
            raise ValueError("session must not be None")

        self.session = session
        self.log = logger or default_logger
        self._closed = False

    @property
    def base_url(self) -> str:
        return str(self.session.base_url)

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "BaseClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the transport handle. Subsequent calls are no-ops."""
        if self._closed:
            return
        self.session.close()
        self._closed = True
        self.log.debug(f"{type(self).__name__} closed")

    # =========================================================================
    # Typed verbs
    # =========================================================================

    def get(
        self,
        path: str,
        response_type: Any = Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Execute GET and return the body as ``response_type``."""
        response = self._send("GET", path, params=params, headers=headers)
        return self._handle_response(response, response_type)

    def post(
        self,
        path: str,
        payload: Any = None,
        response_type: Any = Any,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Execute POST with a JSON body and return the body as ``response_type``."""
        response = self._send("POST", path, payload=payload, headers=headers)
        return self._handle_response(response, response_type)

    def put(
        self,
        path: str,
        payload: Any = None,
        response_type: Any = Any,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Execute PUT with a JSON body and return the body as ``response_type``."""
        response = self._send("PUT", path, payload=payload, headers=headers)
        return self._handle_response(response, response_type)

    def delete(
        self,
        path: str,
        response_type: Any = Any,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Execute DELETE and return the body as ``response_type``."""
        response = self._send("DELETE", path, headers=headers)
        return self._handle_response(response, response_type)

    def send(self, request: PreparedRequest, response_type: Any = Any) -> Any:
        """Dispatch a request produced by HttpRequestBuilder."""
        response = self._send(
            request.method,
            request.uri,
            payload=request.body,
            headers=request.headers,
        )
        return self._handle_response(response, response_type)

    # =========================================================================
    # Raw verbs
    # =========================================================================

    def get_raw(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """Execute GET and return the unprocessed response, whatever its status."""
        return self._send("GET", path, params=params, headers=headers)

    def post_raw(
        self,
        path: str,
        payload: Any = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """Execute POST and return the unprocessed response, whatever its status."""
        return self._send("POST", path, payload=payload, headers=headers)

    # =========================================================================
    # Dispatch and classification
    # =========================================================================

    def _send(
        self,
        method: str,
        path: str,
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """
        Send one request over the transport.

        Raises:
            ApiClientError: When the client has been closed
            TransportError: When no response was received
        """
        if self._closed:
            raise ApiClientError(
                f"{type(self).__name__} is closed; create a new client"
            )

        body = to_jsonable(payload) if payload is not None else None
        request_headers: Dict[str, str] = dict(headers or {})

        self.log.debug(f"Sending {method} {path}")
        try:
            response = self.session.request(
                method,
                path,
                json=body,
                params=dict(params) if params else None,
                headers=request_headers,
            )
        except httpx.TransportError as e:
            self.log.error(f"Error during {method} {path}: {e}")
            raise TransportError(
                f"Failed to execute {method} request to {path}: {e}"
            ) from e

        self.log.debug(f"{method} {path} -> {response.status_code}")
        self._log_to_allure(method, path, request_headers, body, params, response)
        return response

    def _handle_response(self, response: Optional[httpx.Response], response_type: Any) -> Any:
        """
        Classify a response into a typed value or an error.

        Raises:
            TransportError: No response
            HttpStatusError subclass: Non-2xx status (see classify_status)
            DeserializationError: 2xx body not matching response_type
        """
        if response is None:
            raise TransportError("Response is null")

        if not response.is_success:
            error_type = classify_status(response.status_code)
            message = response.text or response.reason_phrase or "Unknown error"
            self.log.warning(
                f"{response.request.method} {response.request.url.path} failed "
                f"with {response.status_code}: {message[:200]}"
            )
            raise error_type(response.status_code, message, body=response.text)

        if response_type is Any:
            return self._loose_body(response)

        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            name = type_name(response_type)
            self.log.error(f"Response deserialization failed for type {name}: {e}")
            raise DeserializationError(
                name, status_code=response.status_code, body=response.text
            ) from e

    @staticmethod
    def _loose_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    # =========================================================================
    # Reporting
    # =========================================================================

    def _log_to_allure(
        self,
        method: str,
        path: str,
        headers: Dict[str, str],
        body: Any,
        params: Optional[Mapping[str, Any]],
        response: httpx.Response,
    ) -> None:
        """
        Log HTTP request/response to Allure report.

        Attaches:
            - Request URL with query parameters
            - Request headers and body (masked)
            - cURL command for reproduction
            - Response status and body (truncated if too long)
        """
        full_url = str(response.request.url)
        status_mark = "OK" if response.is_success else "FAIL"
        step_title = f"[{status_mark}] {method} {path} -> {response.status_code}"

        with allure.step(step_title):
            allure.attach(
                full_url,
                name="Request URL",
                attachment_type=AttachmentType.TEXT
            )

            safe_headers = self._redact_headers(headers)
            if safe_headers:
                allure.attach(
                    json.dumps(safe_headers, ensure_ascii=False, indent=2),
                    name="Request Headers",
                    attachment_type=AttachmentType.JSON
                )

            safe_body = self._redact_body(body)
            if safe_body is not None:
                allure.attach(
                    json.dumps(safe_body, ensure_ascii=False, indent=2, default=str),
                    name="Request Body",
                    attachment_type=AttachmentType.JSON
                )

            if params:
                allure.attach(
                    json.dumps(dict(params), ensure_ascii=False, indent=2, default=str),
                    name="Query Params",
                    attachment_type=AttachmentType.JSON
                )

            allure.attach(
                build_curl_command(method, full_url, safe_headers, safe_body),
                name="cURL Command",
                attachment_type=AttachmentType.TEXT
            )

            allure.attach(
                f"{status_mark} {response.status_code}",
                name="Response Status",
                attachment_type=AttachmentType.TEXT
            )

            try:
                response_content = json.dumps(
                    response.json(), ensure_ascii=False, indent=2
                )
            except ValueError:
                response_content = response.text or "<empty>"

            if len(response_content) > MAX_RESPONSE_LENGTH:
                response_content = (
                    f"{response_content[:MAX_RESPONSE_LENGTH]}\n\n"
                    f"... [Truncated, full length: {len(response_content)} chars] ..."
                )

            allure.attach(
                response_content,
                name="Response Body",
                attachment_type=AttachmentType.JSON
            )

    def _redact_headers(self, headers: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Mask sensitive header values before logging.
        """
        masked = {}
        for key, value in headers.items():
            if key.lower() in SENSITIVE_HEADERS:
                masked[key] = MASKED
            else:
                masked[key] = value
        return masked

    def _redact_body(self, payload: Any) -> Any:
        """
        Recursively mask sensitive fields in request bodies.
        """
        if isinstance(payload, dict):
            redacted = {}
            for key, value in payload.items():
                if any(token in key.lower() for token in SENSITIVE_BODY_KEYS):
                    redacted[key] = MASKED
                else:
                    redacted[key] = self._redact_body(value)
            return redacted
        if isinstance(payload, list):
            return [self._redact_body(item) for item in payload]
        return payload


__all__ = [
    "BaseClient",
    "MAX_RESPONSE_LENGTH",
    "type_name",
]
