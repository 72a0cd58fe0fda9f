import pytest

from app.services.payments import checkout
from app.services.payments.base import compute_signature, verify_signature

TEST_SECRET = "s3cr3t"
GOLDEN_SIGNATURE = "ee21698235c31aef5bb049b86d1c00014db7de75dbe78cb4ed9ffa8e90855655"


def _body(signature=GOLDEN_SIGNATURE):
    return {
        "razorpay_order_id": "order_abc",
        "razorpay_payment_id": "pay_xyz",
        "razorpay_signature": signature,
    }


def _flip_bit(signature: str, index: int, bit: int = 0) -> str:
    return signature[:index] + chr(ord(signature[index]) ^ (1 << bit)) + signature[index + 1:]


def test_golden_signature():
    assert compute_signature(TEST_SECRET, "order_abc", "pay_xyz") == GOLDEN_SIGNATURE


def test_valid_signature_is_accepted(client):
    r = client.post("/api/payment/verify", json=_body())

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Payment verified successfully"}


def test_original_route_alias(client):
    r = client.post("/api/razorpay/verify-payment", json=_body())

    assert r.status_code == 200
    assert r.json()["success"] is True


@pytest.mark.parametrize("signature", ["nope", GOLDEN_SIGNATURE.upper(), GOLDEN_SIGNATURE + "0", GOLDEN_SIGNATURE[:-1]])
def test_other_signatures_are_rejected(client, signature):
    r = client.post("/api/payment/verify", json=_body(signature))

    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Invalid signature"}


def test_client_reported_success_is_ignored(client):
    body = _body("f" * 64)
    body["success"] = True
    body["status"] = "captured"

    r = client.post("/api/payment/verify", json=body)

    assert r.status_code == 400
    assert r.json()["success"] is False


@pytest.mark.parametrize("constant_time", [True, False])
def test_every_single_bit_mutation_fails(constant_time):
    for i in range(len(GOLDEN_SIGNATURE)):
        for bit in range(7):
            mutated = _flip_bit(GOLDEN_SIGNATURE, i, bit)
            assert not verify_signature(TEST_SECRET, "order_abc", "pay_xyz", mutated, constant_time=constant_time)
    assert verify_signature(TEST_SECRET, "order_abc", "pay_xyz", GOLDEN_SIGNATURE, constant_time=constant_time)


@pytest.mark.parametrize(
    "order_id,payment_id",
    [("order_abc", "pay_xyz"), ("order_1", "pay_2"), ("o|x", "p"), ("order_ünï", "pay_ø")],
)
def test_comparison_modes_agree(order_id, payment_id):
    good = compute_signature(TEST_SECRET, order_id, payment_id)
    for candidate in (good, _flip_bit(good, 0), "x" * 64, "ünï"):
        assert verify_signature(TEST_SECRET, order_id, payment_id, candidate, constant_time=True) == verify_signature(
            TEST_SECRET, order_id, payment_id, candidate, constant_time=False
        )


def test_plain_comparison_mode_through_api(client, settings):
    settings.PAYMENT_SIGNATURE_CONSTANT_TIME = False

    assert client.post("/api/payment/verify", json=_body()).status_code == 200
    assert client.post("/api/payment/verify", json=_body(_flip_bit(GOLDEN_SIGNATURE, 10))).status_code == 400


def test_signature_depends_on_secret(client, settings):
    settings.RAZORPAY_KEY_SECRET = "another-secret"

    r = client.post("/api/payment/verify", json=_body())

    assert r.status_code == 400


def test_verify_is_idempotent(client):
    first = client.post("/api/payment/verify", json=_body())
    second = client.post("/api/payment/verify", json=_body())
    assert (first.status_code, first.json()) == (second.status_code, second.json())

    bad = _body("0" * 64)
    first = client.post("/api/payment/verify", json=bad)
    second = client.post("/api/payment/verify", json=bad)
    assert (first.status_code, first.json()) == (second.status_code, second.json())


@pytest.mark.parametrize("missing", ["razorpay_order_id", "razorpay_payment_id", "razorpay_signature"])
def test_missing_fields_skip_the_hmac(client, monkeypatch, missing):
    calls = []
    monkeypatch.setattr(checkout, "verify_signature", lambda *a, **kw: calls.append(a) or True)
    body = _body()
    body.pop(missing)

    r = client.post("/api/payment/verify", json=body)

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Missing required fields"}
    assert calls == []


def test_empty_field_counts_as_missing(client):
    body = _body()
    body["razorpay_payment_id"] = ""

    r = client.post("/api/payment/verify", json=body)

    assert r.status_code == 400
    assert r.json()["error"] == "Missing required fields"


def test_missing_secret_is_a_500(client, settings):
    settings.RAZORPAY_KEY_SECRET = None

    r = client.post("/api/payment/verify", json=_body())

    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Payment verification failed"}


def test_non_string_fields_are_a_400(client):
    body = _body()
    body["razorpay_signature"] = 12345

    r = client.post("/api/payment/verify", json=body)

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid request body"}


@pytest.mark.parametrize("path", ["/api/payment/verify", "/api/razorpay/verify-payment"])
def test_non_json_body_keeps_success_flag(client, path):
    r = client.post(path, content=b"not json", headers={"Content-Type": "application/json"})

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid request body"}


def test_order_create_malformed_body_has_no_success_flag(client):
    r = client.post("/api/order/create", content=b"not json", headers={"Content-Type": "application/json"})

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}
