from conftest import respond
from hashhunt.api.deps import get_oneinch_client, get_order_submitter
from hashhunt.errors import MissingCredentialError
from hashhunt.main import app

MAKER = "0x1111111111111111111111111111111111111111"

ORDER = {
    "makerAsset": "0xmaker",
    "takerAsset": "0xtaker",
    "maker": MAKER,
    "receiver": "0x0000000000000000000000000000000000000000",
    "makingAmount": "1000",
    "takingAmount": "2000",
    "salt": "42",
    "makerTraits": "0xtraits",
}


class _RecordingSubmitter:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def submit_order(self, order, signature, *, chain_id=1, order_hash=None):
        self.calls.append({"order": order, "signature": signature, "chain_id": chain_id, "order_hash": order_hash})
        if self.error:
            raise self.error
        return self.result


def test_submit_delegates_to_submitter(api_client):
    submitter = _RecordingSubmitter(result={"accepted": True})
    app.dependency_overrides[get_order_submitter] = lambda: submitter

    resp = api_client.post(
        "/api/limit-orders/submit",
        json={"order": ORDER, "signature": "0xsig", "chainId": 137, "orderHash": "0xhash"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Order submitted successfully to 1inch"
    assert body["data"]["result"] == {"accepted": True}
    assert "timestamp" in body["data"]
    assert submitter.calls == [{"order": ORDER, "signature": "0xsig", "chain_id": 137, "order_hash": "0xhash"}]


def test_submit_requires_order_and_signature(api_client):
    submitter = _RecordingSubmitter()
    app.dependency_overrides[get_order_submitter] = lambda: submitter

    resp = api_client.post("/api/limit-orders/submit", json={"order": ORDER})

    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert submitter.calls == []


def test_submit_surfaces_submitter_message_verbatim(api_client):
    app.dependency_overrides[get_order_submitter] = lambda: _RecordingSubmitter(error=ValueError("Invalid signature for order"))

    resp = api_client.post("/api/limit-orders/submit", json={"order": ORDER, "signature": "0xsig"})

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Failed to submit order to 1inch",
        "error": "Invalid signature for order",
    }


def test_submit_missing_credential(api_client):
    error = MissingCredentialError("INCH_API_KEY", "1inch API key not configured")
    app.dependency_overrides[get_order_submitter] = lambda: _RecordingSubmitter(error=error)

    resp = api_client.post("/api/limit-orders/submit", json={"order": ORDER, "signature": "0xsig"})

    assert resp.status_code == 500
    assert resp.json()["message"] == "API key not configured"


def test_submit_through_orderbook_client(api_client, upstream):
    upstream.add("/orderbook/v4.0/1", respond({"success": True}))

    resp = api_client.post("/api/limit-orders/submit", json={"order": ORDER, "signature": "0xsig"})

    assert resp.status_code == 200
    assert resp.json()["data"]["result"] == {"success": True}
    assert upstream.requests[0].method == "POST"


def test_submit_rejects_non_object_body(api_client):
    resp = api_client.post("/api/limit-orders/submit", json=["not", "an", "object"])

    assert resp.status_code == 400


def test_list_orders(api_client, upstream):
    upstream.add(
        f"/orderbook/v4.0/1/address/{MAKER}",
        respond(
            [
                {
                    "orderHash": "0xorder",
                    "signature": "0xsig",
                    "createDateTime": "2024-01-01T00:00:00Z",
                    "data": {"makerAsset": "0xa", "takerAsset": "0xb", "makingAmount": "1", "takingAmount": "2"},
                }
            ]
        ),
    )

    resp = api_client.get("/api/limit-orders", params={"address": MAKER})

    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 1
    assert body["orders"][0]["id"] == "0xorder"
    assert body["orders"][0]["status"] == 1
    assert body["orders"][0]["makerAmount"] == "1"


def test_list_orders_missing_address(api_client):
    resp = api_client.get("/api/limit-orders")

    assert resp.status_code == 400
    assert resp.json() == {"orders": [], "total": 0, "error": "Missing address parameter"}


def test_list_orders_upstream_failure_is_empty(api_client, upstream):
    upstream.add(f"/orderbook/v4.0/1/address/{MAKER}", respond({"message": "down"}, status=502))

    resp = api_client.get("/api/limit-orders", params={"address": MAKER})

    assert resp.status_code == 200
    assert resp.json() == {"orders": [], "total": 0}


def test_list_orders_missing_credential(api_client, upstream, oneinch_without_key):
    app.dependency_overrides[get_oneinch_client] = lambda: oneinch_without_key

    resp = api_client.get("/api/limit-orders", params={"address": MAKER})

    assert resp.status_code == 500
    assert resp.json()["error"] == "1inch API key not configured"
    assert upstream.requests == []
