# config_loader.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import InvalidSetting, MalformedConfig
from machine import Machine
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor
from suites import DEFAULT_SUITE, SUITES

debug = Debug()

# ────────────────────────────────────────────────────────────────────────
#  0. Plain records
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class RotorSpec:
    """One catalog entry: NAME, TYPE (M<notches> | N | R) and its cycles."""

    name: str
    kind: str
    cycles: List[str] = field(default_factory=list)

    @property
    def wiring(self) -> str:
        return " ".join(self.cycles)

    def build(self, alphabet: Alphabet) -> Rotor:
        perm = Permutation(self.wiring, alphabet)
        if self.kind.startswith("M"):
            return MovingRotor(self.name, perm, self.kind[1:])
        if self.kind == "N":
            return FixedRotor(self.name, perm)
        return Reflector(self.name, perm)


@dataclass(slots=True)
class MachineSpec:
    """A parsed machine description; every build() makes fresh wheels."""

    alphabet: Alphabet
    num_rotors: int
    pawls: int
    rotors: List[RotorSpec]

    def build(self, *, double_advance: bool = True) -> Machine:
        wheels = [spec.build(self.alphabet) for spec in self.rotors]
        return Machine(
            self.alphabet, self.num_rotors, self.pawls, wheels,
            double_advance=double_advance,
        )

    def names(self) -> List[str]:
        return [spec.name for spec in self.rotors]


@dataclass(slots=True)
class Settings:
    """One machine configuration: rotor order, window letters, rings, plugs."""

    rotors: List[str]
    setting: str
    rings: str | None = None
    plugboard: str = ""

    def to_line(self) -> str:
        parts = ["*", *self.rotors, self.setting]
        if self.rings:
            parts.append(self.rings)
        if self.plugboard:
            parts.append(self.plugboard)
        return " ".join(parts)

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {"rotors": self.rotors, "setting": self.setting}
        if self.rings:
            data["rings"] = self.rings
        if self.plugboard:
            data["plugboard"] = self.plugboard
        return data


# ────────────────────────────────────────────────────────────────────────
#  1. Machine description files
# ────────────────────────────────────────────────────────────────────────


def _is_wiring(token: str) -> bool:
    return "(" in token or ")" in token


def _check_kind(spec: RotorSpec, alphabet: Alphabet) -> None:
    kind = spec.kind
    if kind.startswith("M"):
        bad = [ch for ch in kind[1:] if ch not in alphabet]
        if bad:
            raise MalformedConfig(f"Rotor {spec.name}: notch {bad[0]!r} not in alphabet")
    elif kind not in ("N", "R"):
        raise MalformedConfig(f"Rotor {spec.name}: unknown type {kind!r}")


def parse_machine(text: str) -> MachineSpec:
    """Parse a machine description.

    Line 1 is the alphabet, line 2 holds the slot and pawl counts, and the
    remaining text lists rotors as ``NAME TYPE (cycles)...``. Cycles may run
    on over several lines.
    """
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if len(lines) < 2:
        raise MalformedConfig("Description needs an alphabet line and a slot/pawl line")

    alpha_tokens = lines[0].split()
    if len(alpha_tokens) != 1:
        raise MalformedConfig(f"Alphabet line must be one word, got {lines[0]!r}")
    alphabet = Alphabet(alpha_tokens[0])

    counts = lines[1].split()
    if len(counts) != 2 or not all(tok.isdigit() for tok in counts):
        raise MalformedConfig(f"Expected '<slots> <pawls>', got {lines[1]!r}")
    num_rotors, pawls = (int(tok) for tok in counts)

    specs: List[RotorSpec] = []
    tokens = iter(" ".join(lines[2:]).split())
    for tok in tokens:
        if _is_wiring(tok):
            if not specs:
                raise MalformedConfig(f"Wiring {tok!r} given before any rotor name")
            specs[-1].cycles.append(tok)
            continue
        kind = next(tokens, None)
        if kind is None or _is_wiring(kind):
            raise MalformedConfig(f"Rotor {tok!r} has no type")
        specs.append(RotorSpec(tok, kind))

    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            raise MalformedConfig(f"Rotor {spec.name!r} described twice")
        seen.add(spec.name)
        _check_kind(spec, alphabet)
        if spec.kind == "R" and not Permutation(spec.wiring, alphabet).derangement():
            raise MalformedConfig(f"Reflector {spec.name!r} maps a symbol to itself")

    debug.log("config", "%d rotors, %d slots, %d pawls", len(specs), num_rotors, pawls)
    return MachineSpec(alphabet, num_rotors, pawls, specs)


def read_machine(path: str | Path) -> MachineSpec:
    return parse_machine(Path(path).read_text(encoding="utf-8"))


def load_machine(
    path: str | Path | None = None,
    *,
    suite: str = DEFAULT_SUITE,
    double_advance: bool = True,
) -> Machine:
    """Build a machine from PATH, or from a built-in suite when PATH is None."""
    if path is not None:
        spec = read_machine(path)
    else:
        try:
            spec = parse_machine(SUITES[suite.upper()]["conf"])
        except KeyError:
            raise MalformedConfig(f"Unknown suite '{suite}'. Expected one of {list(SUITES)}") from None
    return spec.build(double_advance=double_advance)


# ────────────────────────────────────────────────────────────────────────
#  2. Settings lines & JSON settings
# ────────────────────────────────────────────────────────────────────────


def parse_settings(line: str, num_rotors: int) -> Settings:
    """Parse ``* NAME... SETTING [RINGS] [(AB) (CD)...]``."""
    text = line.strip()
    if not text.startswith("*"):
        raise MalformedConfig(f"Settings line must start with '*': {line!r}")

    tokens = text[1:].split()
    if len(tokens) < num_rotors + 1:
        raise MalformedConfig(f"Settings line needs {num_rotors} rotors and a setting: {line!r}")

    rotors = tokens[:num_rotors]
    rest = tokens[num_rotors:]
    if any(_is_wiring(tok) for tok in rotors) or _is_wiring(rest[0]):
        raise MalformedConfig(f"Settings line has too few rotors: {line!r}")
    setting = rest.pop(0)

    rings = None
    if rest and not _is_wiring(rest[0]):
        rings = rest.pop(0)
    if any(not _is_wiring(tok) for tok in rest):
        raise MalformedConfig(f"Unexpected token after settings: {line!r}")

    return Settings(rotors, setting, rings, " ".join(rest))


def load_settings(path: str | Path) -> Settings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    required = {"rotors", "setting"}
    missing = required - data.keys()
    if missing:
        raise MalformedConfig(f"Missing keys in settings: {', '.join(sorted(missing))}")
    return Settings(
        list(data["rotors"]),
        data["setting"],
        data.get("rings"),
        data.get("plugboard", ""),
    )


def _check_letters(machine: Machine, value: str, what: str) -> None:
    if len(value) != machine.num_rotors - 1 or any(ch not in machine.alphabet for ch in value):
        raise InvalidSetting(f"{what} {value!r} must be {machine.num_rotors - 1} alphabet symbols")


def build_plugboard(cycles: str, alphabet: Alphabet) -> Permutation:
    plugboard = Permutation(cycles, alphabet)
    for cycle in plugboard.cycles:
        if len(cycle) > 2:
            raise MalformedConfig(f"Plugboard cycle ({cycle}) is not a swap")
    return plugboard


def apply_settings(machine: Machine, settings: Settings) -> None:
    """Configure MACHINE; nothing changes unless every part is valid."""
    plugboard = build_plugboard(settings.plugboard, machine.alphabet)
    _check_letters(machine, settings.setting, "Rotor setting")
    if settings.rings is not None:
        _check_letters(machine, settings.rings, "Ring setting")

    machine.insert_rotors(settings.rotors)
    machine.reset_rings()
    machine.set_rotors(settings.setting)
    if settings.rings is not None:
        machine.set_rings(settings.rings)
    machine.set_plugboard(plugboard)
    debug.log("config", "%s", settings.to_line())


__all__ = [
    "RotorSpec",
    "MachineSpec",
    "Settings",
    "parse_machine",
    "read_machine",
    "load_machine",
    "parse_settings",
    "load_settings",
    "build_plugboard",
    "apply_settings",
]
