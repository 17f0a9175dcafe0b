import base64

from wg_keygen.utils.crypto_utils import derive_public_key, validate_public_key

KNOWN_PRIVATE_KEY = "nPse/4zbQGxOqAM14icWRru4I6g9s9xdhg9sCY2l3ck="
KNOWN_PUBLIC_KEY = "Y3AdHf4MAZi3xgCFxiDfyPBNbBQKuTqTCoDI/XHrnQg="


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_health_without_entropy(client, broken_entropy):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "unhealthy"


def test_create_keypair(client):
    r = client.post("/wireguard/keypair")
    assert r.status_code == 200
    body = r.json()
    assert len(body["private_key"]) == 44
    assert derive_public_key(body["private_key"]) == body["public_key"]

    # fresh pair on every call
    r2 = client.post("/wireguard/keypair")
    assert r2.json()["private_key"] != body["private_key"]


def test_create_keypair_hides_private_key(client, hide_private_keys):
    r = client.post("/wireguard/keypair")
    assert r.status_code == 200
    body = r.json()
    assert "private_key" not in body
    assert validate_public_key(body["public_key"])


def test_create_keypair_without_entropy(client, broken_entropy):
    r = client.post("/wireguard/keypair")
    assert r.status_code == 503
    assert r.json()["detail"]["code"] == "entropy_unavailable"


def test_create_private_key(client):
    r = client.post("/wireguard/private-key")
    assert r.status_code == 200
    private_key = r.json()["private_key"]
    assert len(base64.b64decode(private_key)) == 32


def test_create_private_key_disabled(client, hide_private_keys):
    r = client.post("/wireguard/private-key")
    assert r.status_code == 403


def test_get_public_key(client):
    r = client.post("/wireguard/public-key", json={"private_key": KNOWN_PRIVATE_KEY})
    assert r.status_code == 200
    assert r.json() == {"public_key": KNOWN_PUBLIC_KEY}


def test_get_public_key_wrong_length(client):
    short_key = base64.b64encode(b"\x01" * 16).decode("ascii")
    r = client.post("/wireguard/public-key", json={"private_key": short_key})
    assert r.status_code == 400
    detail = r.json()["detail"]
    assert detail["code"] == "invalid_key_length"
    assert "16" in detail["message"]


def test_get_public_key_invalid_encoding(client):
    r = client.post("/wireguard/public-key", json={"private_key": "not base64!"})
    assert r.status_code == 400
    assert r.json()["detail"]["code"] == "invalid_encoding"


def test_get_public_key_missing_field(client):
    r = client.post("/wireguard/public-key", json={})
    assert r.status_code == 422


def test_check_public_key(client):
    r = client.post("/wireguard/validate-public-key", json={"public_key": KNOWN_PUBLIC_KEY})
    assert r.status_code == 200
    assert r.json() == {"public_key": KNOWN_PUBLIC_KEY, "valid": True}

    for value in ("", "invalid"):
        r = client.post("/wireguard/validate-public-key", json={"public_key": value})
        assert r.status_code == 200
        assert r.json()["valid"] is False


def test_check_keypair(client):
    r = client.post(
        "/wireguard/verify-keypair",
        json={"private_key": KNOWN_PRIVATE_KEY, "public_key": KNOWN_PUBLIC_KEY}
    )
    assert r.status_code == 200
    assert r.json() == {"valid": True}

    pair = client.post("/wireguard/keypair").json()
    r = client.post(
        "/wireguard/verify-keypair",
        json={"private_key": pair["private_key"], "public_key": KNOWN_PUBLIC_KEY}
    )
    assert r.json() == {"valid": False}
