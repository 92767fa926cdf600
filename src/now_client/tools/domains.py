from __future__ import annotations

from typing import Any, Dict, List

from now_client.core.client import NowClient
from now_client.core.errors import MISSING_BODY, MISSING_NAME, MISSING_RECORD_ID
from now_client.models import DomainCreate

from ._params import require, segment

TOOL = "domains"


async def list_domains(client: NowClient) -> List[Dict[str, Any]]:
    """Return all domain names with their related aliases."""
    return await client.get("/domains", selector="domains", tool=TOOL)


async def add_domain(
    client: NowClient, name: str, *, is_external_dns: bool = False
) -> Dict[str, Any]:
    """
    Register a domain.

    With ``is_external_dns`` false an external DNS server must point a CNAME
    or ALIAS at alias.zeit.co; when true, zeit.world must be the domain's DNS.
    """
    require(name, MISSING_NAME, tool="add_domain")
    body = DomainCreate.build(name=name, is_external_dns=is_external_dns).to_body()
    return await client.post("/domains", body=body, tool=TOOL)


async def delete_domain(client: NowClient, name: str) -> Dict[str, Any]:
    require(name, MISSING_NAME, tool="delete_domain")
    return await client.delete(f"/domains/{segment(name)}", tool=TOOL)


async def list_domain_records(client: NowClient, domain: str) -> List[Dict[str, Any]]:
    require(domain, MISSING_NAME, tool="list_domain_records")
    return await client.get(
        f"/domains/{segment(domain)}/records", selector="records", tool=TOOL
    )


async def add_domain_record(
    client: NowClient, domain: str, record: Dict[str, Any]
) -> Dict[str, Any]:
    require(domain, MISSING_NAME, tool="add_domain_record")
    require(record, MISSING_BODY, tool="add_domain_record")
    return await client.post(
        f"/domains/{segment(domain)}/records", body=record, tool=TOOL
    )


async def delete_domain_record(
    client: NowClient, domain: str, record_id: str
) -> Dict[str, Any]:
    require(domain, MISSING_NAME, tool="delete_domain_record")
    require(record_id, MISSING_RECORD_ID, tool="delete_domain_record")
    return await client.delete(
        f"/domains/{segment(domain)}/records/{segment(record_id)}", tool=TOOL
    )
