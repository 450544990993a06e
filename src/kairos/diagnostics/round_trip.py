from __future__ import annotations

import argparse
import random
from typing import List

from kairos.core.time import parse_iso_ms
from kairos.engines.bridge import micro_pulses_since_genesis, unix_ms_from_micro_pulses


def roundtrip_test(N: int, start_ms: int, end_ms: int, seed: int, *, max_failures: int) -> int:
    """
    Random instants: ms -> micro -> ms must return the same ms, and the
    forward map must be monotonic on sorted samples.
    """
    rng = random.Random(seed)
    failures = 0

    samples: List[int] = sorted(rng.randint(start_ms, end_ms) for _ in range(N))
    prev_mu = None
    for t in samples:
        mu = micro_pulses_since_genesis(t)
        back = unix_ms_from_micro_pulses(mu)
        if back != t:
            failures += 1
            print(f"FAIL (round-trip) t={t} mu={mu} back={back}")
        if prev_mu is not None and mu < prev_mu:
            failures += 1
            print(f"FAIL (monotonic) t={t} mu={mu} prev={prev_mu}")
        prev_mu = mu
        if failures >= max_failures:
            break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: unix ms -> micro-pulses -> unix ms.")
    p.add_argument("--N", type=int, default=5000, help="Number of random instants.")
    p.add_argument("--start", type=str, default="1900-01-01T00:00:00Z", help="Start instant (ISO).")
    p.add_argument("--end", type=str, default="2400-12-31T00:00:00Z", help="End instant (ISO).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_iso_ms(args.start)
    end = parse_iso_ms(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0
    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
