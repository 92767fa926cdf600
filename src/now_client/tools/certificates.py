from __future__ import annotations

from typing import Any, Dict, List, Optional

from now_client.core.client import NowClient
from now_client.core.errors import MISSING_CERT, MISSING_CN, MISSING_KEY
from now_client.models import CertificateReplacement, CertificateRequest

from ._params import require, segment

CERTS_PATH = "/now/certs"
TOOL = "certificates"


async def list_certificates(
    client: NowClient, cn: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Return all certificates, or only those for common name ``cn``."""
    path = f"{CERTS_PATH}/{segment(cn)}" if cn else CERTS_PATH
    return await client.get(path, selector="certs", tool=TOOL)


async def create_certificate(client: NowClient, cn: str) -> Dict[str, Any]:
    require(cn, MISSING_CN, tool="create_certificate")
    body = CertificateRequest.for_cn(cn).to_body()
    return await client.post(CERTS_PATH, body=body, tool=TOOL)


async def renew_certificate(client: NowClient, cn: str) -> Dict[str, Any]:
    require(cn, MISSING_CN, tool="renew_certificate")
    body = CertificateRequest.for_cn(cn, renew=True).to_body()
    return await client.post(CERTS_PATH, body=body, tool=TOOL)


async def replace_certificate(
    client: NowClient,
    cn: str,
    cert: str,
    key: str,
    ca: Optional[str] = None,
) -> Any:
    """Upload a custom X.509 certificate; returns its creation date."""
    require(cn, MISSING_CN, tool="replace_certificate")
    require(cert, MISSING_CERT, tool="replace_certificate")
    require(key, MISSING_KEY, tool="replace_certificate")
    body = CertificateReplacement.build(
        domains=[cn], cert=cert, key=key, ca=ca or ""
    ).to_body()
    return await client.put(CERTS_PATH, body=body, selector="created", tool=TOOL)


async def delete_certificate(client: NowClient, cn: str) -> Dict[str, Any]:
    require(cn, MISSING_CN, tool="delete_certificate")
    return await client.delete(f"{CERTS_PATH}/{segment(cn)}", tool=TOOL)
