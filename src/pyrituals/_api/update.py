"""Attribute update endpoint.

Endpoint:
  - POST /api/hub/update/attr (form: hub, json='{"attr": {<key>: <value>}}')
"""

from __future__ import annotations

import json


def build_update_form(hub_hash: str, key: str, value: str) -> dict[str, str]:
    """Build the form body for a single-attribute patch.

    The patch travels as a JSON string inside the form, not as a JSON body.
    """
    return {
        "hub": hub_hash,
        "json": json.dumps({"attr": {key: value}}),
    }
