"""Session bootstrap and the context object passed to every hub operation."""

from __future__ import annotations

import dataclasses
import logging

from pyrituals._api.login import build_login_form, parse_login_response
from pyrituals._constants import ACCOUNT_HASH_KEY, LOGIN_ENDPOINT
from pyrituals._redact import mask_hash
from pyrituals._transport import Transport
from pyrituals.config import RitualsConfig
from pyrituals.credentials import CredentialStore, load_key, save_key
from pyrituals.exceptions import RitualsSessionError, RitualsTransportError
from pyrituals.models.account import Credentials, DeviceIdentifier

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class SessionContext:
    """Everything a hub operation needs, resolved once at bootstrap."""

    credentials: Credentials
    device: DeviceIdentifier

    @property
    def account_hash(self) -> str:
        return self.credentials.account_hash

    @property
    def hub_hash(self) -> str:
        return self.device.hub_hash


class SessionManager:
    """Owns the account hash.

    The stored hash is reused without any network call. Otherwise a single
    login is attempted; a failed login is not retried and leaves no token.
    """

    def __init__(self, config: RitualsConfig, store: CredentialStore, transport: Transport) -> None:
        self._config = config
        self._store = store
        self._transport = transport
        self._credentials: Credentials | None = None

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    async def ensure_session(self) -> Credentials:
        """Return the session, restoring it from the store or logging in."""
        if self._credentials is not None:
            return self._credentials

        stored = await load_key(self._store, ACCOUNT_HASH_KEY)
        if stored is not None:
            _logger.info("Account hash restored from storage")
            self._credentials = Credentials(account_hash=stored)
            return self._credentials

        _logger.info("Logging in")
        try:
            body = await self._transport.post_form(LOGIN_ENDPOINT, build_login_form(self._config))
        except RitualsTransportError as exc:
            _logger.error("Login failed: %s", exc)
            raise RitualsSessionError.from_transport("Login failed", exc) from exc

        try:
            login = parse_login_response(body)
        except RitualsSessionError as exc:
            _logger.error("Login failed: %s", exc)
            raise

        await save_key(self._store, ACCOUNT_HASH_KEY, login.account_hash)
        self._credentials = Credentials(account_hash=login.account_hash)
        _logger.info("Logged in successfully (account %s)", mask_hash(login.account_hash))
        return self._credentials

    def reset(self) -> None:
        """Drop the in-memory session (the store is left untouched)."""
        self._credentials = None
