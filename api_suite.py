#!/usr/bin/env python3
# Cross-checks a running primeset API against sympy.
import os, csv, random, requests
from sympy import isprime, factorint, nextprime, prime, primepi

BASE    = (os.getenv("BASE_URL", "http://127.0.0.1:8080") or "http://127.0.0.1:8080").rstrip("/")
TIMEOUT = float(os.getenv("READ_TIMEOUT", "30"))
FIND_MAX = int(os.getenv("SUITE_FIND_MAX", "1000000"))
SEED    = int(os.getenv("SUITE_SEED", "0"))

session = requests.Session()
session.headers.update({"User-Agent": "primeset-api-suite/1.0"})

def jget(path, **params):
    r = session.get(f"{BASE}{path}", params=params, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()

def expected_factors(n):
    # factorint(0) is {0: 1}; the API answers [] for 0 and 1
    if n <= 1:
        return []
    out = []
    for p, e in sorted(factorint(n).items()):
        out += [int(p)] * e
    return out

def cases(rng):
    # hand-picked sanity
    yield from (0, 1, 2, 3, 4, 12, 121, 1000, 1009, 10_000_000, 2147483647, 2147483649)
    for k in range(2, 10):
        for _ in range(5):
            yield rng.randrange(10**(k-1), 10**k)

def check(n):
    fails = []
    r = jget("/api/is_prime", n=n)
    if r["is_prime"] != bool(isprime(n)):
        fails.append(f"is_prime={r['is_prime']}")
    r = jget("/api/factor", n=n)
    if r["factors"] != expected_factors(n):
        fails.append(f"factors={r['factors']}")
    # find caches every prime below n, so only small n
    if 1 <= n <= FIND_MAX:
        r = jget("/api/find", n=n)
        p = int(nextprime(n - 1))
        if r["prime"] != p or r["index"] != int(primepi(p)) - 1:
            fails.append(f"find=({r['index']}, {r['prime']})")
    return fails

def main():
    rng = random.Random(SEED)
    fails = []
    total = 0
    for n in cases(rng):
        total += 1
        try:
            bad = check(n)
        except requests.RequestException as e:
            fails.append({"n": n, "reason": f"HTTP: {e}"})
            continue
        if bad:
            fails.append({"n": n, "reason": "; ".join(bad)})

    for k in (0, 1, 99, 999):
        total += 1
        r = jget("/api/nth", k=k)
        if r["prime"] != int(prime(k + 1)):
            fails.append({"n": k, "reason": f"nth={r['prime']}"})

    print("\n=== API SUITE SUMMARY ===", flush=True)
    print(f"Total: {total} | ok: {total - len(fails)} | fails: {len(fails)}", flush=True)
    if fails:
        fn = "api_suite_failures.csv"
        with open(fn, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=["n", "reason"])
            w.writeheader()
            for row in fails:
                w.writerow(row)
        print(f"Wrote failure details to {fn}", flush=True)
    return 1 if fails else 0

if __name__ == "__main__":
    raise SystemExit(main())
