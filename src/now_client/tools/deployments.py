from __future__ import annotations

from typing import Any, Dict, List

from now_client.core.client import NowClient
from now_client.core.errors import MISSING_BODY, MISSING_FILE_ID, MISSING_ID

from ._params import require, segment

TOOL = "deployments"


async def list_deployments(client: NowClient) -> List[Dict[str, Any]]:
    """Return all deployments of the account."""
    return await client.get("/now/deployments", selector="deployments", tool=TOOL)


async def get_deployment(client: NowClient, deployment_id: str) -> Dict[str, Any]:
    require(deployment_id, MISSING_ID, tool="get_deployment")
    return await client.get(f"/now/deployments/{segment(deployment_id)}", tool=TOOL)


async def create_deployment(
    client: NowClient, body: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Create a deployment.

    ``body`` maps file paths to file contents, plus any deployment
    options the API accepts.
    """
    require(body, MISSING_BODY, tool="create_deployment")
    return await client.post("/now/deployments", body=body, tool=TOOL)


async def delete_deployment(client: NowClient, deployment_id: str) -> Dict[str, Any]:
    require(deployment_id, MISSING_ID, tool="delete_deployment")
    return await client.delete(
        f"/now/deployments/{segment(deployment_id)}", tool=TOOL
    )


async def list_files(client: NowClient, deployment_id: str) -> List[Dict[str, Any]]:
    """Return the file tree of a deployment."""
    require(deployment_id, MISSING_ID, tool="list_files")
    return await client.get(
        f"/now/deployments/{segment(deployment_id)}/files", tool=TOOL
    )


async def get_file(client: NowClient, deployment_id: str, file_id: str) -> Any:
    """Return file content: decoded JSON for JSON files, text otherwise."""
    require(deployment_id, MISSING_ID, tool="get_file")
    require(file_id, MISSING_FILE_ID, tool="get_file")
    return await client.get(
        f"/now/deployments/{segment(deployment_id)}/files/{segment(file_id)}",
        tool=TOOL,
    )
