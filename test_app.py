import pytest

import app as api
from primeset import config

@pytest.fixture
def client():
    api.reset_engine("trial")
    api.app.config["TESTING"] = True
    with api.app.test_client() as c:
        yield c

def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "engine": "trial", "cached": 2, "largest": 3}
    assert "X-Compute-ms" in r.headers

def test_is_prime(client):
    assert client.get("/api/is_prime?n=97").get_json() == {"n": 97, "is_prime": True}
    assert client.get("/api/is_prime?n=2147483649").get_json()["is_prime"] is False

def test_factor(client):
    body = client.get("/api/factor?n=12").get_json()
    assert body == {"n": 12, "factors": [2, 2, 3], "unique": [2, 3], "phi": 4}
    body = client.get("/api/factor?n=1").get_json()
    assert body == {"n": 1, "factors": [], "unique": [], "phi": 1}

def test_find_and_cache_growth(client):
    assert client.get("/api/find?n=1000").get_json() == {"n": 1000, "index": 168, "prime": 1009}
    health = client.get("/api/health").get_json()
    assert health["cached"] == 169
    assert health["largest"] == 1009

def test_nth(client):
    assert client.get("/api/nth?k=0").get_json()["prime"] == 2
    assert client.get("/api/nth?k=999").get_json()["prime"] == 7919

def test_primes(client):
    assert client.get("/api/primes").get_json()["primes"] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    body = client.get("/api/primes?start=2&count=5").get_json()
    assert body == {"start": 2, "count": 5, "primes": [5, 7, 11, 13, 17]}

@pytest.mark.parametrize("url", [
    "/api/is_prime",
    "/api/is_prime?n=abc",
    "/api/is_prime?n=-1",
    "/api/factor?n=1.5",
    "/api/find?n=",
    "/api/nth?k=x",
    "/api/primes?count=-3",
])
def test_bad_requests(client, url):
    assert client.get(url).status_code == 400

def test_limits(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_N", 100)
    monkeypatch.setattr(config, "MAX_COUNT", 5)
    assert client.get("/api/is_prime?n=100").status_code == 200
    assert client.get("/api/is_prime?n=101").status_code == 400
    assert client.get("/api/nth?k=6").status_code == 400
    assert client.get("/api/primes?count=6").status_code == 400

def test_reset_engine_switches_strategy(client):
    api.reset_engine("sieve")
    assert client.get("/api/health").get_json()["engine"] == "sieve"
    assert client.get("/api/health").get_json()["cached"] == 3
    with pytest.raises(ValueError):
        api.reset_engine("nope")
