"""API dependencies: store injection and request body parsing."""

import json
from typing import Any
from urllib.parse import parse_qs

from fastapi import Request

from usuarios_api.core.config import Settings
from usuarios_api.core.exceptions import MalformedBodyError
from usuarios_api.db.store import UserStore


def get_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_body(request: Request) -> dict[str, Any]:
    """Decode a JSON or URL-encoded body into a field mapping.

    Unknown content types and JSON values other than objects give an empty
    mapping, which validation then reports as a missing field.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type not in {"application/json", "application/x-www-form-urlencoded"}:
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedBodyError("Request body is not valid UTF-8") from exc

    if content_type == "application/json":
        try:
            parsed = json.loads(text)
        except ValueError as exc:
            raise MalformedBodyError(f"Malformed JSON body: {exc}") from exc
        return parsed if isinstance(parsed, dict) else {}

    form = parse_qs(text, keep_blank_values=True)
    return {key: values[-1] if values else "" for key, values in form.items()}
