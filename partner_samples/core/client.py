"""
Core HTTP client for the Partner Center REST API.

Handles authentication, request/response and error handling.
"""

import json
import logging
import os
import urllib.error
import urllib.parse
import urllib.request
import uuid
from typing import Any

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_BASE_URL = "https://api.partnercenter.microsoft.com"
DEFAULT_AUTHORITY = "https://login.microsoftonline.com"
DEFAULT_RESOURCE = "https://api.partnercenter.microsoft.com"
DEFAULT_TIMEOUT = 60


class CLIError(Exception):
    """Base error class for CLI errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class APIError(CLIError):
    """API error with status code and message."""

    def __init__(self, message: str, status: int = 0, details: dict | None = None):
        super().__init__(message, details)
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        if self.status:
            result["status"] = self.status
        return result


class ValidationError(CLIError):
    """Validation error for local input/data issues (not API errors)."""


def _error_message(error_data: Any, fallback: str) -> str:
    """Pull a readable message out of an error body."""
    if not isinstance(error_data, dict):
        return fallback
    # Partner Center returns {"code": ..., "description": ...}
    if error_data.get("description"):
        return str(error_data["description"])
    # Token endpoint and others use {"error": "..."} or {"error": {"message": "..."}}
    error_field = error_data.get("error")
    if isinstance(error_field, str):
        return error_data.get("error_description") or error_field
    if isinstance(error_field, dict):
        return error_field.get("message", fallback)
    return fallback


class APIClient:
    """
    Low-level HTTP client for the Partner Center API.

    Handles:
    - Authentication via bearer token (explicit, env var, or app credentials)
    - HTTP methods (GET, PATCH)
    - Error handling and response parsing
    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        tenant_id: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the API client.

        Args:
            access_token: Bearer token (or PARTNER_CENTER_ACCESS_TOKEN env var)
            base_url: API base URL (or PARTNER_CENTER_BASE_URL env var)
            tenant_id: Azure AD tenant for app authentication (or PARTNER_CENTER_TENANT_ID)
            client_id: Application ID (or PARTNER_CENTER_CLIENT_ID)
            client_secret: Application secret (or PARTNER_CENTER_CLIENT_SECRET)
            timeout: Request timeout in seconds

        """
        self.access_token = access_token or os.environ.get("PARTNER_CENTER_ACCESS_TOKEN")
        env_base_url = os.environ.get("PARTNER_CENTER_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = (base_url or env_base_url).rstrip("/")
        self.tenant_id = tenant_id or os.environ.get("PARTNER_CENTER_TENANT_ID")
        self.client_id = client_id or os.environ.get("PARTNER_CENTER_CLIENT_ID")
        self.client_secret = client_secret or os.environ.get("PARTNER_CENTER_CLIENT_SECRET")
        self.timeout = timeout

    def _ensure_access_token(self) -> str:
        """Ensure a bearer token is available, acquiring one if app credentials are set."""
        if self.access_token:
            return self.access_token
        if self.tenant_id and self.client_id and self.client_secret:
            self.access_token = self._acquire_app_token()
            return self.access_token
        raise APIError(
            "PARTNER_CENTER_ACCESS_TOKEN not set. Set it, or set PARTNER_CENTER_TENANT_ID, "
            "PARTNER_CENTER_CLIENT_ID and PARTNER_CENTER_CLIENT_SECRET"
        )

    def _acquire_app_token(self) -> str:
        """Request a token from Azure AD with the client-credentials grant."""
        url = f"{DEFAULT_AUTHORITY}/{self.tenant_id}/oauth2/token"
        body = urllib.parse.urlencode(
            {
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "resource": DEFAULT_RESOURCE,
            }
        ).encode("utf-8")
        headers = {"Content-Type": "application/x-www-form-urlencoded"}

        logger.debug("Acquiring app token for tenant %s", self.tenant_id)
        result = self._send(urllib.request.Request(url, data=body, headers=headers, method="POST"), self.timeout)
        token = result.get("access_token")
        if not token:
            raise APIError("Token response did not contain an access token")
        return token

    def _build_url(self, path: str) -> str:
        """Build full URL from path."""
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path}"

    def _send(self, req: urllib.request.Request, request_timeout: int) -> dict[str, Any]:
        """Send a prepared request and parse the JSON response."""
        try:
            with urllib.request.urlopen(req, timeout=request_timeout) as response:
                logger.debug("%s %s -> %s", req.get_method(), req.full_url, response.status)
                response_data = response.read().decode("utf-8")
                if response_data:
                    return json.loads(response_data)
                return {"success": True}

        except urllib.error.HTTPError as e:
            logger.debug("%s %s -> %s", req.get_method(), req.full_url, e.code)
            try:
                error_body = e.read().decode("utf-8")
                error_data = json.loads(error_body)
            except json.JSONDecodeError:
                raise APIError(str(e), status=e.code)
            details = error_data if isinstance(error_data, dict) else {"body": error_data}
            raise APIError(_error_message(error_data, str(e)), status=e.code, details=details)

        except urllib.error.URLError as e:
            raise APIError(f"Connection error: {e.reason}")

        except TimeoutError:
            raise APIError(f"Request timed out after {request_timeout} seconds")

        except json.JSONDecodeError as e:
            raise APIError(f"Invalid JSON response: {e}")

    def _make_request(
        self,
        method: str,
        path: str,
        data: dict | None = None,
        timeout: int | None = None,
    ) -> dict[str, Any]:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, PATCH)
            path: API path (e.g., /v1/customers/{id}/subscriptions)
            data: Request body for PATCH
            timeout: Request timeout override

        Returns:
            Parsed JSON response

        Raises:
            APIError: On HTTP, auth or parsing errors

        """
        access_token = self._ensure_access_token()

        url = self._build_url(path)
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "MS-RequestId": str(uuid.uuid4()),
            "MS-CorrelationId": str(uuid.uuid4()),
        }

        body = json.dumps(data).encode("utf-8") if data else None
        request_timeout = timeout or self.timeout

        req = urllib.request.Request(url, data=body, headers=headers, method=method)
        return self._send(req, request_timeout)

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Make a GET request."""
        if params:
            # Filter out None values and URL-encode
            filtered_params = {k: v for k, v in params.items() if v is not None}
            if filtered_params:
                query_string = urllib.parse.urlencode(filtered_params)
                separator = "&" if "?" in path else "?"
                path = f"{path}{separator}{query_string}"
        return self._make_request("GET", path)

    def patch(self, path: str, data: dict | None = None) -> dict[str, Any]:
        """Make a PATCH request."""
        return self._make_request("PATCH", path, data)

    # =========================================================================
    # Customer-scoped helpers
    # =========================================================================

    def customer_path(self, customer_id: str) -> str:
        """Get the customer path prefix."""
        if not customer_id:
            raise ValidationError("Customer ID required")
        return f"/v1/customers/{urllib.parse.quote(customer_id, safe='')}"

    def customer_get(
        self,
        customer_id: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make a GET request to a customer-scoped endpoint."""
        return self.get(f"{self.customer_path(customer_id)}{path}", params)

    def customer_patch(
        self,
        customer_id: str,
        path: str,
        data: dict | None = None,
    ) -> dict[str, Any]:
        """Make a PATCH request to a customer-scoped endpoint."""
        return self.patch(f"{self.customer_path(customer_id)}{path}", data)
