# app/services/cloud_share_client.py

import httpx

from config.logging_config import get_logger
from config.settings import SHARE_SERVER_URL, SHARE_API_KEY, SHARE_TIMEOUT_SECONDS

logger = get_logger(__name__)

ACCOUNT_AVAILABLE = "available"
ACCOUNT_NO_ACCOUNT = "noAccount"
ACCOUNT_RESTRICTED = "restricted"
ACCOUNT_UNKNOWN = "couldNotDetermine"
ACCOUNT_STATUSES = (ACCOUNT_AVAILABLE, ACCOUNT_NO_ACCOUNT, ACCOUNT_RESTRICTED, ACCOUNT_UNKNOWN)


class ShareError(Exception):
    """Base class for failures while talking to the share server."""


class AccountUnavailableError(ShareError):
    pass


class ShareConflictError(ShareError):
    pass


class ShareServerError(ShareError):
    pass


class CloudShareClient:
    """Thin HTTP client for the cloud share server."""

    def __init__(self, base_url: str = SHARE_SERVER_URL, api_key: str = SHARE_API_KEY,
                 timeout: float = SHARE_TIMEOUT_SECONDS, transport: httpx.BaseTransport = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        if not self.configured:
            raise AccountUnavailableError("No cloud account is configured on this device.")

        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout,
                              headers=self._headers(), transport=self.transport) as client:
                response = client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Share server request %s %s failed: %s", method, path, e)
            raise ShareServerError("Could not reach the share server.") from e

        if response.status_code in (401, 403):
            raise AccountUnavailableError("The cloud account is not signed in or not allowed to share.")
        if response.status_code == 409:
            raise ShareConflictError("The share was changed on the server. Try again.")
        return response

    @staticmethod
    def _json(response: httpx.Response) -> dict:
        try:
            body = response.json()
        except ValueError as e:
            logger.error("Share server sent a body that is not JSON: %s", e)
            raise ShareServerError("Share server sent an invalid response.") from e
        if not isinstance(body, dict):
            raise ShareServerError("Share server sent an invalid response.")
        return body

    def account_status(self) -> str:
        if not self.configured:
            return ACCOUNT_NO_ACCOUNT

        response = self._request("GET", "/account/status")
        if response.is_error:
            raise ShareServerError(f"Share server answered {response.status_code}.")
        status = self._json(response).get("status")
        return status if status in ACCOUNT_STATUSES else ACCOUNT_UNKNOWN

    def push_share(self, share) -> str:
        """Saves the share on the server and returns the URL it assigns."""
        response = self._request(
            "PUT",
            f"/shares/{share.id}",
            json={
                "caregiver_id": share.caregiver_id,
                "title": share.title,
                "token": share.token,
                "permission": share.permission,
            },
        )
        if response.is_error:
            raise ShareServerError(f"Share server answered {response.status_code}.")

        url = self._json(response).get("url")
        if not url:
            raise ShareServerError("Share server did not assign a URL.")
        return url

    def revoke_share(self, share_id: str) -> None:
        response = self._request("DELETE", f"/shares/{share_id}")
        # Already gone on the server
        if response.status_code == 404:
            return
        if response.is_error:
            raise ShareServerError(f"Share server answered {response.status_code}.")
