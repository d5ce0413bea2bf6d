"""High-level async client for the Rituals Perfume Genie API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from pyrituals._transport import HttpTransport, Transport
from pyrituals.commands import CommandDispatcher
from pyrituals.config import RitualsConfig
from pyrituals.credentials import CredentialStore, DirectoryCredentialStore
from pyrituals.exceptions import RitualsApiError, RitualsError, RitualsHubError, RitualsSessionError
from pyrituals.hub import HubResolver
from pyrituals.models.hub import Hub
from pyrituals.session import SessionContext, SessionManager
from pyrituals.state.synchronizer import StateSynchronizer

_logger = logging.getLogger(__name__)


class RitualsClient:
    """Async client for a single Rituals hub.

    Usage::

        async with RitualsClient(config) as client:
            hub = await client.start()
            await client.set_power(True)

    A failed :meth:`start` leaves the client unusable until :meth:`logout`
    clears the stored identifiers or a new client is created.
    """

    def __init__(
        self,
        config: RitualsConfig,
        *,
        store: CredentialStore | None = None,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._store: CredentialStore = store if store is not None else DirectoryCredentialStore(config.storage_dir)
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._transport = transport
        self._sessions: SessionManager | None = None
        self._hubs: HubResolver | None = None
        self._state: StateSynchronizer | None = None
        self._commands: CommandDispatcher | None = None
        self._context: SessionContext | None = None
        self._bootstrap_error: RitualsApiError | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RitualsClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        self._sessions = SessionManager(self._config, self._store, self._transport)
        self._hubs = HubResolver(self._store, self._transport)
        self._state = StateSynchronizer(self._transport)
        self._commands = CommandDispatcher(self._transport, self._state)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None
        self._context = None

    # ------------------------------------------------------------------
    # Bootstrap
    # ------------------------------------------------------------------

    @property
    def config(self) -> RitualsConfig:
        return self._config

    @property
    def context(self) -> SessionContext | None:
        return self._context

    @property
    def snapshot(self) -> Hub | None:
        """Last successfully pulled hub, or ``None``."""
        return self._state.snapshot if self._state is not None else None

    async def start(self) -> Hub:
        """Resolve session and hub, then pull the first snapshot."""
        if self._bootstrap_error is not None:
            raise type(self._bootstrap_error)(
                f"Bootstrap previously failed: {self._bootstrap_error}",
                status_code=self._bootstrap_error.status_code,
                endpoint=self._bootstrap_error.endpoint,
            ) from self._bootstrap_error

        sessions, hubs, state = self._require_components()
        try:
            credentials = await sessions.ensure_session()
            device = await hubs.ensure_hub(credentials)
        except (RitualsSessionError, RitualsHubError) as exc:
            _logger.error("Configuring failed: %s", exc)
            self._bootstrap_error = exc
            raise

        self._context = SessionContext(credentials=credentials, device=device)
        return await state.pull(self._context)

    async def logout(self) -> None:
        """Forget the stored account and hub hashes.

        The next :meth:`start` logs in and resolves the hub again.
        """
        clear = getattr(self._store, "clear", None)
        if clear is None:
            raise RitualsError(f"{type(self._store).__name__} cannot be cleared")
        await asyncio.to_thread(clear)
        if self._sessions is not None:
            self._sessions.reset()
        if self._hubs is not None:
            self._hubs.reset()
        if self._state is not None:
            self._state.clear()
        self._context = None
        self._bootstrap_error = None
        _logger.info("Stored credentials cleared")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_components(self) -> tuple[SessionManager, HubResolver, StateSynchronizer]:
        if self._sessions is None or self._hubs is None or self._state is None:
            raise RitualsError("Client not initialized. Use 'async with RitualsClient(...) as client:'")
        return self._sessions, self._hubs, self._state

    def _require_context(self) -> SessionContext:
        if self._context is not None:
            return self._context
        if self._bootstrap_error is not None:
            raise type(self._bootstrap_error)(
                f"Client unusable after failed bootstrap: {self._bootstrap_error}",
                status_code=self._bootstrap_error.status_code,
                endpoint=self._bootstrap_error.endpoint,
            )
        raise RitualsSessionError("No session. Call start() first")

    # ------------------------------------------------------------------
    # Reads and writes
    # ------------------------------------------------------------------

    async def refresh(self) -> Hub:
        """Pull the current hub state, replacing the snapshot."""
        context = self._require_context()
        _, _, state = self._require_components()
        return await state.pull(context)

    async def set_power(self, on: bool) -> Hub | None:
        context = self._require_context()
        if self._commands is None:
            raise RitualsError("Client not initialized")
        return await self._commands.set_power(context, on)

    async def set_speed_level(self, level: str) -> Hub | None:
        context = self._require_context()
        if self._commands is None:
            raise RitualsError("Client not initialized")
        return await self._commands.set_speed_level(context, level)
