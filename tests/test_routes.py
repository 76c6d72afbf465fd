"""HTTP surface: /encode, /decode, /must-encode, /health."""

import pytest
from fastapi.testclient import TestClient

from mimeword.config.settings import get_settings
from mimeword.main import app


@pytest.fixture
def client(monkeypatch) -> TestClient:
    monkeypatch.delenv("CODEC_PROFILE", raising=False)
    get_settings.cache_clear()
    yield TestClient(app)
    get_settings.cache_clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_encode_with_default_profile(client):
    response = client.post("/encode", json={"text": "café"})
    assert response.status_code == 200
    assert response.json() == {
        "encoded": "=?utf-8?Q?caf=C3=A9?=",
        "must_encode": True,
        "scheme": "Q",
        "charset": "utf-8",
        "words": 1,
    }


def test_encode_with_profile_and_override(client):
    body = client.post("/encode", json={"text": "café", "profile": "base64"}).json()
    assert body["encoded"] == "=?utf-8?B?Y2Fmw6k=?="
    body = client.post("/encode", json={"text": "café", "profile": "latin1"}).json()
    assert body["encoded"] == "=?iso-8859-1?Q?caf=E9?="
    body = client.post("/encode", json={"text": "é" * 31, "scheme": "B"}).json()
    assert body["scheme"] == "B"
    assert body["words"] == 2
    body = client.post("/encode", json={"text": "é" * 31, "split": False}).json()
    assert body["words"] == 1


def test_encode_ascii_is_unchanged(client):
    body = client.post("/encode", json={"text": "hello"}).json()
    assert body["encoded"] == "hello"
    assert body["must_encode"] is False
    assert body["words"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"text": "café", "charset": "bogus-charset"},
        {"text": "café", "charset": "idna"},
        {"text": "café", "charset": "undefined"},
        {"text": "café", "profile": "nope"},
        {"text": "café", "scheme": "X"},
        {},
    ],
)
def test_encode_rejects_bad_requests(client, payload):
    assert client.post("/encode", json=payload).status_code == 422


def test_decode(client):
    body = client.post("/decode", json={"text": "=?utf-8?B?Y2Fmw6k=?="}).json()
    assert body == {"decoded": "café", "recognized": True}


def test_decode_passes_through_invalid_words(client):
    body = client.post("/decode", json={"text": "=?bogus-charset?Q?abc?="}).json()
    assert body == {"decoded": "=?bogus-charset?Q?abc?=", "recognized": False}
    body = client.post("/decode", json={"text": "plain-ascii-header"}).json()
    assert body == {"decoded": "plain-ascii-header", "recognized": False}


def test_must_encode(client):
    assert client.post("/must-encode", json={"text": "café"}).json() == {"must_encode": True}
    assert client.post("/must-encode", json={"text": ""}).json() == {"must_encode": False}


def test_decode_passes_through_nul_charset(client):
    word = "=?utf\u0000-8?Q?abc?="
    response = client.post("/decode", json={"text": word})
    assert response.status_code == 200
    assert response.json() == {"decoded": word, "recognized": False}
