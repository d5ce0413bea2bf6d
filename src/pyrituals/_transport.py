"""HTTP transport for the Rituals cloud API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyrituals._constants import FORM_CONTENT_TYPE
from pyrituals.config import RitualsConfig
from pyrituals.exceptions import RitualsTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the component modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> Any:
        ...

    async def post_form(self, endpoint: str, form: Mapping[str, str]) -> Any:
        ...


class HttpTransport:
    """aiohttp transport sending the fixed User-Agent and form-encoded bodies.

    No authorization header is ever sent: the account hash travels in the
    URL path and the hub hash in the form body.
    """

    def __init__(self, config: RitualsConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = (
            aiohttp.ClientTimeout(total=config.request_timeout) if config.request_timeout is not None else None
        )

    def _headers(self, *, form: bool = False) -> dict[str, str]:
        headers = {"User-Agent": self._config.user_agent}
        if form:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        form: Mapping[str, str] | None = None,
    ) -> str:
        url = f"{self._config.base_url}{endpoint}"
        kwargs: dict[str, Any] = {"headers": self._headers(form=form is not None)}
        if form is not None:
            kwargs["data"] = dict(form)
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, **kwargs) as resp:
                text = await resp.text()
                if resp.status != 200:
                    raise RitualsTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except RitualsTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise RitualsTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        return text

    async def get_json(self, endpoint: str) -> Any:
        """GET *endpoint* and return the decoded JSON body."""
        text = await self._request("GET", endpoint)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise RitualsTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=200,
                endpoint=endpoint,
            ) from exc

    async def post_form(self, endpoint: str, form: Mapping[str, str]) -> Any:
        """POST a form-encoded body and return the decoded JSON body.

        Returns ``None`` when the body is empty or not JSON; callers that
        need a payload validate it themselves.
        """
        text = await self._request("POST", endpoint, form=form)
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            _logger.debug("Non-JSON body from %s ignored", endpoint)
            return None
