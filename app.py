import threading, time
from itertools import islice
from flask import Flask, g, request, jsonify
from werkzeug.exceptions import BadRequest

from primeset import U64_MAX, PrimeSetIter, phi
from primeset import config

app = Flask(__name__)

# one shared cache for the whole process; engines are not thread-safe
_engine = config.make_engine()
_engine_name = config.ENGINE
_engine_lock = threading.Lock()

def reset_engine(name: str | None = None):
    """Swap in a fresh engine (used by tests and on config changes)."""
    global _engine, _engine_name
    with _engine_lock:
        _engine = config.make_engine(name)
        _engine_name = (name or config.ENGINE).strip().lower()
    return _engine

# ------------------ helpers ------------------
def _int_arg(name: str, default: int | None = None, hi: int = U64_MAX) -> int:
    s = request.args.get(name, "").strip()
    if not s:
        if default is None:
            raise BadRequest(f"missing {name}")
        return default
    try:
        v = int(s, 10)
    except ValueError:
        raise BadRequest(f"{name} must be integer")
    if v < 0 or v > hi:
        raise BadRequest(f"{name} must be in 0..{hi}")
    return v

@app.after_request
def _compute_header(resp):
    t0 = g.get("t0")
    if t0 is not None:
        resp.headers["X-Compute-ms"] = str(int((time.perf_counter() - t0) * 1000))
    return resp

@app.before_request
def _start_clock():
    g.t0 = time.perf_counter()

# ------------------ API ------------------
@app.get("/api/health")
def api_health():
    with _engine_lock:
        return jsonify(ok=True, engine=_engine_name, cached=len(_engine), largest=_engine.largest())

@app.get("/api/is_prime")
def api_is_prime():
    n = _int_arg("n", hi=config.MAX_N)
    with _engine_lock:
        ok = _engine.is_prime(n)
    return jsonify(n=n, is_prime=ok)

@app.get("/api/factor")
def api_factor():
    n = _int_arg("n", hi=config.MAX_N)
    with _engine_lock:
        fs = _engine.prime_factors(n)
    uniq = list(dict.fromkeys(fs))
    return jsonify(n=n, factors=fs, unique=uniq, phi=phi(n, uniq))

@app.get("/api/find")
def api_find():
    n = _int_arg("n", hi=config.MAX_N)
    with _engine_lock:
        ix, p = _engine.find(n)
    return jsonify(n=n, index=ix, prime=p)

@app.get("/api/nth")
def api_nth():
    k = _int_arg("k", hi=config.MAX_COUNT)
    with _engine_lock:
        p = _engine.get(k)
    return jsonify(k=k, prime=p)

@app.get("/api/primes")
def api_primes():
    start = _int_arg("start", default=0, hi=config.MAX_COUNT)
    count = _int_arg("count", default=10, hi=config.MAX_COUNT)
    with _engine_lock:
        primes = list(islice(PrimeSetIter(_engine, start), count))
    return jsonify(start=start, count=count, primes=primes)

if __name__ == "__main__":
    app.run("127.0.0.1", 8080, debug=True)
