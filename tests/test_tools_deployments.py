import json

import pytest
import respx
from httpx import Response
from now_client.core.client import NowClient
from now_client.core.errors import (
    MISSING_BODY,
    MISSING_FILE_ID,
    MISSING_ID,
    MissingParameterError,
    NowAPIError,
    NowClientError,
    NowParseError,
)
from now_client.tools.deployments import (
    create_deployment,
    delete_deployment,
    get_deployment,
    get_file,
    list_deployments,
    list_files,
)

BASE = "https://api.zeit.co"


@pytest.fixture
def client():
    return NowClient(token="mock-token")


@pytest.mark.asyncio
@respx.mock
async def test_list_deployments_unwraps_envelope(client):
    respx.get(f"{BASE}/now/deployments").mock(
        return_value=Response(
            200, json={"deployments": [{"uid": "A"}, {"uid": "B"}]}
        )
    )

    async with client:
        result = await list_deployments(client)

    assert result == [{"uid": "A"}, {"uid": "B"}]


@pytest.mark.asyncio
@respx.mock
async def test_get_deployment(client):
    payload = {"uid": "dpl_1", "host": "app-abc.now.sh", "state": "READY"}
    respx.get(f"{BASE}/now/deployments/dpl_1").mock(
        return_value=Response(200, json=payload)
    )

    async with client:
        result = await get_deployment(client, "dpl_1")

    assert result == payload


@pytest.mark.asyncio
@respx.mock
async def test_create_deployment_posts_body(client):
    body = {"package": {"name": "app"}, "index.js": "console.log(1)"}
    route = respx.post(f"{BASE}/now/deployments").mock(
        return_value=Response(200, json={"uid": "dpl_2", "host": "app.now.sh"})
    )

    async with client:
        result = await create_deployment(client, body)

    assert result["uid"] == "dpl_2"
    assert json.loads(route.calls[0].request.content) == body


@pytest.mark.asyncio
@respx.mock
async def test_delete_deployment(client):
    route = respx.delete(f"{BASE}/now/deployments/dpl_1").mock(
        return_value=Response(200, json={"uid": "dpl_1", "state": "DELETED"})
    )

    async with client:
        result = await delete_deployment(client, "dpl_1")

    assert result["state"] == "DELETED"
    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_list_files_and_get_file(client):
    respx.get(f"{BASE}/now/deployments/dpl_1/files").mock(
        return_value=Response(200, json=[{"type": "file", "name": "index.js", "uid": "f1"}])
    )
    respx.get(f"{BASE}/now/deployments/dpl_1/files/f1").mock(
        return_value=Response(200, text="console.log(1)")
    )

    async with client:
        files = await list_files(client, "dpl_1")
        content = await get_file(client, "dpl_1", files[0]["uid"])

    assert files[0]["name"] == "index.js"
    assert content == "console.log(1)"


@pytest.mark.asyncio
@respx.mock
async def test_remote_error_is_normalized(client):
    respx.get(f"{BASE}/now/deployments/nope").mock(
        return_value=Response(
            404, json={"err": {"code": "not_found", "message": "Deployment not found"}}
        )
    )

    async with client:
        with pytest.raises(NowAPIError) as exc:
            await get_deployment(client, "nope")

    assert exc.value.error == {"code": "not_found", "message": "Deployment not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda c: get_deployment(c, ""), MISSING_ID),
        (lambda c: delete_deployment(c, None), MISSING_ID),
        (lambda c: list_files(c, ""), MISSING_ID),
        (lambda c: create_deployment(c, None), MISSING_BODY),
        (lambda c: create_deployment(c, {}), MISSING_BODY),
        (lambda c: get_file(c, None, "f1"), MISSING_ID),
        (lambda c: get_file(c, "dpl_1", ""), MISSING_FILE_ID),
    ],
)
@respx.mock
async def test_missing_parameters_short_circuit(client, call, expected):
    async with client:
        with pytest.raises(MissingParameterError) as exc:
            await call(client)

    assert exc.value.error == expected
    assert respx.calls.call_count == 0


@pytest.mark.asyncio
@respx.mock
async def test_unencodable_body_raises_client_error(client):
    async with client:
        with pytest.raises(NowClientError) as exc:
            await create_deployment(client, {"index.js": object()})

    assert isinstance(exc.value, NowAPIError)
    assert isinstance(exc.value.cause, NowParseError)
    assert respx.calls.call_count == 0
