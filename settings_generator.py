# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from config_loader import MachineSpec, Settings, parse_machine, read_machine
from errors import BadGeometry, EnigmaError
from suites import DEFAULT_SUITE, SUITES

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_rotors(spec: MachineSpec, rng: Random | SystemRandom) -> List[str]:
    """Reflector, then fixed fillers, then exactly `pawls` moving rotors."""
    by_kind = {"R": [], "N": [], "M": []}
    for rotor in spec.rotors:
        by_kind[rotor.kind[0]].append(rotor.name)

    n_fixed = spec.num_rotors - 1 - spec.pawls
    if not by_kind["R"] or len(by_kind["N"]) < n_fixed or len(by_kind["M"]) < spec.pawls:
        raise BadGeometry("Catalog cannot fill every slot")

    return (
        [rng.choice(by_kind["R"])]
        + rng.sample(by_kind["N"], n_fixed)
        + rng.sample(by_kind["M"], spec.pawls)
    )


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> str:
    """Return *k* disjoint plug swaps in cycle notation."""
    k = max(0, min(k, len(alpha) // 2))
    pool = list(alpha)
    rng.shuffle(pool)
    return " ".join(f"({a}{b})" for a, b in zip(pool[::2], pool[1::2][:k]))


def generate(
    spec: MachineSpec,
    rng: Random | SystemRandom,
    *,
    pairs: int = 10,
    rings: bool = False,
) -> Settings:
    alpha = spec.alphabet.symbols
    width = spec.num_rotors - 1
    return Settings(
        rotors=choose_rotors(spec, rng),
        setting="".join(rng.choices(alpha, k=width)),
        rings="".join(rng.choices(alpha, k=width)) if rings else None,
        plugboard=choose_pairs(alpha, pairs, rng),
    )


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate daily machine settings")
    p.add_argument("--conf", type=Path, help="Machine description file (default: built-in suite)")
    p.add_argument("--suite", choices=sorted(SUITES), default=DEFAULT_SUITE)
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=10, help="Plugboard swaps (default: 10)")
    p.add_argument("--rings", action="store_true", help="Also draw ring settings")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_settings.json"),
        help="Destination JSON file (default: enigma_settings.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_cli(argv)
    try:
        spec = read_machine(args.conf) if args.conf else parse_machine(SUITES[args.suite]["conf"])
        settings = generate(spec, build_rng(args.seed), pairs=args.pairs, rings=args.rings)
    except (EnigmaError, OSError) as err:
        raise SystemExit(f"❌  {err}")

    args.outfile.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {settings.rotors}\n"
        f"   setting     : {settings.setting}\n"
        f"   rings       : {settings.rings or '-'}\n"
        f"   plug pairs  : {settings.plugboard.count('(')}\n"
        f"{settings.to_line()}")


if __name__ == "__main__":
    main()
