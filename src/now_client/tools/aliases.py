from __future__ import annotations

from typing import Any, Dict, List, Optional

from now_client.core.client import NowClient
from now_client.core.errors import MISSING_ALIAS, MISSING_ID
from now_client.models import AliasCreate

from ._params import require, segment

TOOL = "aliases"


async def list_aliases(
    client: NowClient, deployment_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Return every alias of the account, or only those of one deployment."""
    if deployment_id:
        path = f"/now/deployments/{segment(deployment_id)}/aliases"
    else:
        path = "/now/aliases"
    return await client.get(path, selector="aliases", tool=TOOL)


async def create_alias(
    client: NowClient, deployment_id: str, alias: str
) -> Dict[str, Any]:
    """Bind hostname ``alias`` to a deployment."""
    require(deployment_id, MISSING_ID, tool="create_alias")
    require(alias, MISSING_ALIAS, tool="create_alias")
    return await client.post(
        f"/now/deployments/{segment(deployment_id)}/aliases",
        body=AliasCreate.build(alias=alias).to_body(),
        tool=TOOL,
    )


async def delete_alias(client: NowClient, alias_id: str) -> Dict[str, Any]:
    require(alias_id, MISSING_ID, tool="delete_alias")
    return await client.delete(f"/now/aliases/{segment(alias_id)}", tool=TOOL)
