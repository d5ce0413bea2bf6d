"""Login endpoint.

Endpoint:
  - POST /ocapi/login (form: email, password) -> {"account_hash": "..."}
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pyrituals._constants import LOGIN_ENDPOINT
from pyrituals._redact import redact_for_log
from pyrituals.config import RitualsConfig
from pyrituals.exceptions import RitualsSessionError
from pyrituals.models.account import LoginResponse

_logger = logging.getLogger(__name__)


def build_login_form(config: RitualsConfig) -> dict[str, str]:
    return {"email": config.email, "password": config.password}


def parse_login_response(body: Any) -> LoginResponse:
    """Validate a login body.

    Raises
    ------
    RitualsSessionError
        If the body is not an object or carries no ``account_hash``.
    """
    _logger.debug("Login response parsed=%s", redact_for_log(body))
    if not isinstance(body, dict) or body.get("account_hash") is None:
        raise RitualsSessionError(
            "Login response missing account_hash",
            status_code=200,
            endpoint=LOGIN_ENDPOINT,
        )
    try:
        return LoginResponse.model_validate(body)
    except ValidationError as exc:
        raise RitualsSessionError(
            f"Login response rejected: {exc.error_count()} invalid field(s)",
            status_code=200,
            endpoint=LOGIN_ENDPOINT,
        ) from exc
