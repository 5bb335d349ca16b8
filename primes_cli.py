import sys, argparse
from primeset import make_engine, ENGINES

MODES = ("is_prime", "factor", "find", "nth")

def process(pset, mode: str, n: int):
    if mode == "is_prime":
        print(f"{n}\t{'prime' if pset.is_prime(n) else 'composite'}")
    elif mode == "factor":
        fs = pset.prime_factors(n)
        print(f"{n}\t" + "\t".join(str(p) for p in fs))
    elif mode == "find":
        ix, p = pset.find(n)
        print(f"{n}\t{ix}\t{p}")
    else:
        print(f"{n}\t{pset.get(n)}")
    return 0

def main(argv=None):
    ap = argparse.ArgumentParser(description="Prime search, primality and factorization over a prime cache.")
    ap.add_argument("--engine", choices=sorted(ENGINES), default=None, help="override PRIMESET_ENGINE")
    ap.add_argument("--mode", choices=MODES, default="is_prime")
    ap.add_argument("N", nargs="*", type=int, help="optional list of integers")
    args = ap.parse_args(argv)

    pset = make_engine(args.engine)
    rc = 0
    if args.N:
        inputs = args.N
    else:
        inputs = []
        for line in sys.stdin:
            line = line.strip()
            if not line: continue
            try: inputs.append(int(line, 10))
            except ValueError:
                print(f"# skip: {line}", file=sys.stderr); rc |= 1
    for n in inputs:
        try:
            rc |= process(pset, args.mode, n)
        except (ValueError, IndexError) as e:
            print(f"# skip: {n} ({e})", file=sys.stderr); rc |= 1
    return rc

if __name__ == "__main__":
    raise SystemExit(main())
