import json

import pytest
import respx
from httpx import Response
from now_client.core.client import NowClient
from now_client.core.errors import (
    MISSING_CERT,
    MISSING_CN,
    MISSING_KEY,
    MissingParameterError,
)
from now_client.tools.certificates import (
    create_certificate,
    delete_certificate,
    list_certificates,
    renew_certificate,
    replace_certificate,
)

BASE = "https://api.zeit.co"


@pytest.fixture
def client():
    return NowClient(token="mock-token")


@pytest.mark.asyncio
@respx.mock
async def test_list_certificates_all_and_by_cn(client):
    all_route = respx.get(f"{BASE}/now/certs").mock(
        return_value=Response(200, json={"certs": [{"cn": "a.com"}, {"cn": "b.com"}]})
    )
    cn_route = respx.get(f"{BASE}/now/certs/a.com").mock(
        return_value=Response(200, json={"certs": [{"cn": "a.com"}]})
    )

    async with client:
        everything = await list_certificates(client)
        only_a = await list_certificates(client, cn="a.com")

    assert len(everything) == 2
    assert only_a == [{"cn": "a.com"}]
    assert all_route.call_count == 1
    assert cn_route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_create_and_renew_bodies(client):
    route = respx.post(f"{BASE}/now/certs").mock(
        return_value=Response(200, json={"uid": "cert_1"})
    )

    async with client:
        await create_certificate(client, "a.com")
        await renew_certificate(client, "a.com")

    first, second = (json.loads(c.request.content) for c in route.calls)
    assert first == {"domains": ["a.com"]}
    assert second == {"domains": ["a.com"], "renew": True}


@pytest.mark.asyncio
@respx.mock
async def test_replace_certificate_returns_created(client):
    route = respx.put(f"{BASE}/now/certs").mock(
        return_value=Response(200, json={"created": "2017-04-26T10:00:00.000Z"})
    )

    async with client:
        created = await replace_certificate(client, "a.com", "CERT", "KEY")

    assert created == "2017-04-26T10:00:00.000Z"
    assert json.loads(route.calls[0].request.content) == {
        "domains": ["a.com"],
        "ca": "",
        "cert": "CERT",
        "key": "KEY",
    }


@pytest.mark.asyncio
@respx.mock
async def test_replace_certificate_with_ca(client):
    route = respx.put(f"{BASE}/now/certs").mock(
        return_value=Response(200, json={"created": "now"})
    )

    async with client:
        await replace_certificate(client, "a.com", "CERT", "KEY", ca="CHAIN")

    assert json.loads(route.calls[0].request.content)["ca"] == "CHAIN"


@pytest.mark.asyncio
@respx.mock
async def test_delete_certificate(client):
    route = respx.delete(f"{BASE}/now/certs/a.com").mock(
        return_value=Response(200, json={})
    )

    async with client:
        assert await delete_certificate(client, "a.com") == {}

    assert route.called


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda c: create_certificate(c, ""), MISSING_CN),
        (lambda c: renew_certificate(c, None), MISSING_CN),
        (lambda c: delete_certificate(c, ""), MISSING_CN),
        (lambda c: replace_certificate(c, "", "CERT", "KEY"), MISSING_CN),
        (lambda c: replace_certificate(c, "a.com", "", "KEY"), MISSING_CERT),
        (lambda c: replace_certificate(c, "a.com", "CERT", ""), MISSING_KEY),
    ],
)
@respx.mock
async def test_missing_parameters_short_circuit(client, call, expected):
    async with client:
        with pytest.raises(MissingParameterError) as exc:
            await call(client)

    assert exc.value.error == expected
    assert respx.calls.call_count == 0
