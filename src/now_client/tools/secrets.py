from __future__ import annotations

from typing import Any, Dict, List

from now_client.core.client import NowClient
from now_client.core.errors import MISSING_ID, MISSING_NAME, MISSING_VALUE
from now_client.models import SecretCreate, SecretRename

from ._params import require, segment

TOOL = "secrets"


async def list_secrets(client: NowClient) -> List[Dict[str, Any]]:
    return await client.get("/now/secrets", selector="secrets", tool=TOOL)


async def create_secret(client: NowClient, name: str, value: str) -> Dict[str, Any]:
    """Store a secret; the response carries its uid."""
    require(name, MISSING_NAME, tool="create_secret")
    require(value, MISSING_VALUE, tool="create_secret")
    return await client.post(
        "/now/secrets",
        body=SecretCreate.build(name=name, value=value).to_body(),
        tool=TOOL,
    )


async def rename_secret(client: NowClient, secret_id: str, name: str) -> Dict[str, Any]:
    """``secret_id`` may be the uid or the current name."""
    require(secret_id, MISSING_ID, tool="rename_secret")
    require(name, MISSING_NAME, tool="rename_secret")
    return await client.patch(
        f"/now/secrets/{segment(secret_id)}",
        body=SecretRename.build(name=name).to_body(),
        tool=TOOL,
    )


async def delete_secret(client: NowClient, secret_id: str) -> Dict[str, Any]:
    require(secret_id, MISSING_ID, tool="delete_secret")
    return await client.delete(f"/now/secrets/{segment(secret_id)}", tool=TOOL)
