from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

from now_client.core.errors import missing
from now_client.core.observability import log_event


def require(value: Any, pair: Mapping[str, str], *, tool: str) -> None:
    """Raise MissingParameterError for an absent value; nothing is sent."""
    if not value:
        log_event("missing_parameter", tool=tool, code=pair["code"])
        raise missing(pair)


def segment(value: Any) -> str:
    """Escape a path-embedded identifier."""
    return quote(str(value), safe="")
