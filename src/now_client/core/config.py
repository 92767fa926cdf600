from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import load_dotenv

from .client import DEFAULT_BASE_URL, NowClient
from .errors import MissingTokenError

TOKEN_ENV_VAR = "NOW_TOKEN"
BASE_URL_ENV_VAR = "NOW_API_URL"
CONFIG_FILENAME = ".now.json"

log = logging.getLogger("now_client.config")


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME


def load_config_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read the JSON config file; missing or unreadable files yield {}."""
    path = path or default_config_path()
    if not path.is_file():
        log.debug("config.missing", extra={"path": str(path)})
        return {}
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        log.warning(
            "config.unreadable", extra={"path": str(path), "error": str(exc)}
        )
        return {}
    return data if isinstance(data, dict) else {}


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load the API base URL and token from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    base_url = os.getenv(BASE_URL_ENV_VAR, "").strip() or DEFAULT_BASE_URL
    token = os.getenv(TOKEN_ENV_VAR, "").strip()
    return base_url, token


def resolve_token(
    token: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
    use_dotenv: bool = True,
) -> Optional[str]:
    """
    Resolve the API token: explicit argument, then NOW_TOKEN,
    then the ``token`` field of ~/.now.json.
    """
    if token:
        return token

    if environ is None:
        _, env_token = load_env_config(use_dotenv=use_dotenv)
    else:
        env_token = (environ.get(TOKEN_ENV_VAR) or "").strip()
    if env_token:
        return env_token

    file_token = load_config_file(config_path).get("token")
    if isinstance(file_token, str) and file_token.strip():
        return file_token.strip()
    return None


def create_client_from_env(token: Optional[str] = None, **kwargs) -> NowClient:
    """Create a NowClient, resolving the token once."""
    resolved = resolve_token(token, config_path=kwargs.pop("config_path", None))
    if not resolved:
        log.error(
            "No token found! Supply it as argument or use the %s env variable. "
            "~/%s will be used if it's found in your home directory.",
            TOKEN_ENV_VAR,
            CONFIG_FILENAME,
        )
        raise MissingTokenError(f"Missing {TOKEN_ENV_VAR} or ~/{CONFIG_FILENAME}.")
    if "base_url" not in kwargs:
        kwargs["base_url"], _ = load_env_config(use_dotenv=False)
    return NowClient(token=resolved, **kwargs)


__all__ = [
    "TOKEN_ENV_VAR",
    "BASE_URL_ENV_VAR",
    "CONFIG_FILENAME",
    "default_config_path",
    "load_config_file",
    "load_env_config",
    "resolve_token",
    "create_client_from_env",
]
