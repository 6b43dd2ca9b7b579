# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

from config_loader import Settings, apply_settings, load_machine, load_settings, parse_settings
from debug import COMPONENTS, Debug
from errors import EnigmaError, MalformedConfig
from machine import Machine
from suites import DEFAULT_SUITE, SUITES
from utilities import describe_rotors, format_blocks, preprocess_message

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches that influence the conversion loop."""

    block: int = 5                  # output group size (0 = no grouping)
    double_advance: bool = True     # literal stepping; False = textbook double-step


# ────────────────────────────────────────────────────────────────────────
#  1. Message loop
# ────────────────────────────────────────────────────────────────────────


def process(
    machine: Machine,
    lines: Iterable[str],
    out: TextIO,
    cfg: Config,
    *,
    settings: Settings | None = None,
) -> None:
    """Convert every message line, reconfiguring on each ``*`` line.

    The first non-blank line must configure the machine unless SETTINGS
    already did.
    """
    configured = False
    if settings is not None:
        apply_settings(machine, settings)
        configured = True

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.lstrip().startswith("*"):
            apply_settings(machine, parse_settings(line, machine.num_rotors))
            configured = True
            continue
        if not configured:
            if not line.strip():
                continue
            raise MalformedConfig("Input must start with a settings line ('* ...')")

        msg = preprocess_message(line, machine.alphabet)
        result = machine.convert(msg)
        debug.log("cli", "%r -> %r", msg, result)
        out.write(format_blocks(result, cfg.block) + "\n")


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor machine")
    p.add_argument("input", nargs="?", type=Path, help="Message file (default: stdin)")
    p.add_argument("output", nargs="?", type=Path, help="Result file (default: stdout)")
    p.add_argument("--conf", metavar="FILE", type=Path, help="Machine description file. Default: a built-in suite")
    p.add_argument("--suite", choices=sorted(SUITES), default=DEFAULT_SUITE, help=f"Built-in suite used without --conf. Default: {DEFAULT_SUITE}")
    p.add_argument("--settings", metavar="JSON", type=Path, help="Initial settings from JSON instead of a leading '*' line")
    p.add_argument("--textbook-stepping", action="store_true", help="Step the middle rotor once per double-step instead of the literal rule")
    p.add_argument("--block", type=int, default=5, help="Output group size, 0 for none. Default: 5")
    p.add_argument("--debug", nargs="+", metavar="COMPONENT", choices=COMPONENTS, default=[], help="Enable debug logging for components")
    p.add_argument("--list-rotors", action="store_true", help="Print the rotor catalog and exit")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> None:
    cfg = Config(block=args.block, double_advance=not args.textbook_stepping)
    machine = load_machine(args.conf, suite=args.suite, double_advance=cfg.double_advance)

    if args.list_rotors:
        print(f"{machine.num_rotors} slots, {machine.num_pawls} pawls", file=stdout)
        for row in describe_rotors(machine.catalog.values()):
            print(row, file=stdout)
        return

    settings = load_settings(args.settings) if args.settings else None

    src = args.input.open(encoding="utf-8") if args.input else stdin
    dst = args.output.open("w", encoding="utf-8") if args.output else stdout
    try:
        process(machine, src, dst, cfg, settings=settings)
    finally:
        if args.input:
            src.close()
        if args.output:
            dst.close()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.debug:
        debug.enable(*args.debug)

    try:
        run(args, sys.stdin, sys.stdout)
    except (EnigmaError, OSError) as err:
        sys.exit(f"❌  {err}")


if __name__ == "__main__":
    main()
