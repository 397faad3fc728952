import logging

import requests
from requests.structures import CaseInsensitiveDict

from .config import BASE_URL, DEFAULT_TIMEOUT, ClientConfig, load_config
from .errors import (
    FALLBACK_MESSAGE,
    ApiResponseError,
    RequestEncodeError,
    RequestFailure,
    ResponseDecodeError,
    TransportError,
)
from .models import ApiRequest, HttpMethod

logger = logging.getLogger(__name__)


def _error_payload(response: requests.Response):
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(payload) -> str:
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return FALLBACK_MESSAGE


class NexusClient:
    def __init__(self, token: str, base_url: str = BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        """
        token = Nexus API credential, sent as a Bearer token on every call.
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json"
        }

    @classmethod
    def from_config(cls, config: ClientConfig) -> "NexusClient":
        return cls(token=config.api_key, base_url=config.base_url, timeout=config.timeout)

    @classmethod
    def from_env(cls, **overrides) -> "NexusClient":
        return cls.from_config(load_config(**overrides))

    def build_request(self, endpoint: str, method: str = HttpMethod.GET, headers=None, body=None, params=None) -> ApiRequest:
        merged = CaseInsensitiveDict(self.headers)
        merged.update(headers or {})
        return ApiRequest(
            method=method,
            url=f"{self.base_url}{endpoint}",
            endpoint=endpoint,
            headers=merged,
            body=body,
            params=params,
        )

    def request(self, endpoint: str, method: str = HttpMethod.GET, headers=None, body=None, params=None):
        """
        Makes one call to the Nexus API and returns the decoded JSON body.

        Raises a RequestFailure subclass on any failure, after logging it
        together with the endpoint.
        """
        req = self.build_request(endpoint, method=method, headers=headers, body=body, params=params)
        try:
            return self._send(req)
        except RequestFailure as e:
            logger.error("API Error [%s]: %s", endpoint, e)
            raise

    def _send(self, req: ApiRequest):
        try:
            r = requests.request(
                req.method,
                req.url,
                headers=dict(req.headers),
                json=req.body,
                params=req.params,
                timeout=self.timeout,
            )
        except requests.exceptions.InvalidJSONError as e:
            raise RequestEncodeError(f"Request body is not JSON serializable: {e}", req.endpoint) from e
        except requests.RequestException as e:
            raise TransportError(str(e) or FALLBACK_MESSAGE, req.endpoint) from e

        if not 200 <= r.status_code < 300:
            payload = _error_payload(r)
            raise ApiResponseError(
                _error_message(payload),
                req.endpoint,
                status_code=r.status_code,
                payload=payload,
            )

        if r.status_code == 204:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Invalid JSON in response: {e}", req.endpoint) from e

    def get(self, endpoint: str, params=None):
        return self.request(endpoint, params=params)

    def post(self, endpoint: str, body=None):
        return self.request(endpoint, method=HttpMethod.POST, body=body)

    def patch(self, endpoint: str, body=None):
        return self.request(endpoint, method=HttpMethod.PATCH, body=body)

    def delete(self, endpoint: str):
        return self.request(endpoint, method=HttpMethod.DELETE)
