from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Union
import json
import logging

import httpx
from pydantic import BaseModel

from .config import ClientConfig
from .exceptions import AxmeConfigError, AxmeDecodeError, AxmeHTTPError, AxmeTransportError
from .models import RequestOptions


JsonObject = Dict[str, Any]
Payload = Union[BaseModel, Mapping[str, Any]]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


class AxmeClient:
    """
    Client for the AXME user endpoints (nicks and user profiles).

    Every operation is a single request: no retries, no caching. Responses are returned
    as plain dicts exactly as the server sent them.

    Example:
        >>> from axme import AxmeClient, RequestOptions
        >>> with AxmeClient(base_url="https://api.axme.example", api_key="token") as client:
        ...     client.register_nick(
        ...         {"nick": "@partner.user", "display_name": "Partner User"},
        ...         RequestOptions(idempotency_key="register-1"),
        ...     )
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        base_url = (base_url or "").strip()
        api_key = (api_key or "").strip()
        if not base_url:
            raise AxmeConfigError("base_url is required")
        if not api_key:
            raise AxmeConfigError("api_key is required")

        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._logger = logger

        # A caller-supplied client stays owned by the caller.
        self._owns_client = http_client is None
        self._client: httpx.Client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "AxmeClient":
        return cls(
            config.base_url,
            config.api_key,
            http_client=config.http_client,
            timeout=config.timeout,
            logger=config.logger,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "AxmeClient":
        return cls.from_config(ClientConfig.from_env(**overrides))

    @property
    def base_url(self) -> str:
        return self._base_url

    def register_nick(self, payload: Payload, options: Optional[RequestOptions] = None) -> JsonObject:
        return self._request_json("POST", "/v1/users/register-nick", payload=payload, options=options)

    def check_nick(self, nick: str, options: Optional[RequestOptions] = None) -> JsonObject:
        return self._request_json("GET", "/v1/users/check-nick", query={"nick": nick}, options=options)

    def rename_nick(self, payload: Payload, options: Optional[RequestOptions] = None) -> JsonObject:
        return self._request_json("POST", "/v1/users/rename-nick", payload=payload, options=options)

    def get_user_profile(self, owner_agent: str, options: Optional[RequestOptions] = None) -> JsonObject:
        return self._request_json("GET", "/v1/users/profile", query={"owner_agent": owner_agent}, options=options)

    def update_user_profile(self, payload: Payload, options: Optional[RequestOptions] = None) -> JsonObject:
        return self._request_json("POST", "/v1/users/profile/update", payload=payload, options=options)

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, Optional[str]]] = None,
        payload: Optional[Payload] = None,
        options: Optional[RequestOptions] = None,
    ) -> JsonObject:
        options = options or RequestOptions()
        url = f"{self._base_url}{path}"

        params: Dict[str, str] = {}
        for key, value in (query or {}).items():
            if not _is_blank(value):
                params[key] = value

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

        content: Optional[bytes] = None
        if payload is not None:
            content = self._encode_payload(payload)
            headers["Content-Type"] = "application/json"

        if not _is_blank(options.idempotency_key):
            headers["Idempotency-Key"] = options.idempotency_key
        if not _is_blank(options.trace_id):
            headers["X-Trace-Id"] = options.trace_id

        timeout = options.timeout if options.timeout is not None else httpx.USE_CLIENT_DEFAULT
        try:
            request = self._client.build_request(
                method,
                url,
                params=params or None,
                content=content,
                headers=headers,
                timeout=timeout,
            )

            if self._logger is not None:
                self._logger.debug("axme %s %s", method, request.url)

            response = self._client.send(request)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            if self._logger is not None:
                self._logger.warning("axme %s %s failed: %r", method, path, e)
            raise AxmeTransportError(f"Request failed: {e}") from e

        return self._decode_response(method, path, response)

    @staticmethod
    def _encode_payload(payload: Payload) -> bytes:
        if isinstance(payload, BaseModel):
            # Fields left unset are omitted; an explicit None is sent as null.
            body: Any = payload.model_dump(mode="json", exclude_unset=True)
        else:
            body = dict(payload)

        try:
            return json.dumps(body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise AxmeDecodeError(f"Payload is not JSON serializable: {e}") from e

    def _decode_response(self, method: str, path: str, response: httpx.Response) -> JsonObject:
        if not response.is_success:
            if self._logger is not None:
                self._logger.warning("axme %s %s returned status %s", method, path, response.status_code)
            raise AxmeHTTPError(response.status_code, response.text)

        if not response.content:
            return {}

        try:
            data = json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as e:
            if self._logger is not None:
                self._logger.warning("axme %s %s returned malformed JSON", method, path)
            raise AxmeDecodeError(f"Invalid response format: {e}") from e

        if not isinstance(data, dict):
            if self._logger is not None:
                self._logger.warning("axme %s %s returned a non-object JSON body", method, path)
            raise AxmeDecodeError(f"Expected a JSON object, got {type(data).__name__}")

        return data

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
