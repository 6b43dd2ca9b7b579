# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Root of every failure raised by the simulator."""


# ── wiring ────────────────────────────────────────────────────────
class MalformedAlphabet(EnigmaError):
    pass


class MalformedPermutation(EnigmaError):
    pass


# ── rotor assignment ──────────────────────────────────────────────
class UnknownRotor(EnigmaError):
    pass


class DuplicateRotor(EnigmaError):
    pass


class ReflectorRequired(EnigmaError):
    pass


class PawlCountMismatch(EnigmaError):
    pass


class BadGeometry(EnigmaError):
    """Slot / pawl counts that no machine can satisfy."""


# ── settings ──────────────────────────────────────────────────────
class InvalidSetting(EnigmaError):
    pass


class AlphabetMismatch(EnigmaError):
    pass


class MalformedConfig(EnigmaError):
    """Syntax error in a machine description or settings line."""


# ── conversion ────────────────────────────────────────────────────
class InvalidSymbol(EnigmaError):
    pass


__all__ = [
    "EnigmaError",
    "MalformedAlphabet",
    "MalformedPermutation",
    "UnknownRotor",
    "DuplicateRotor",
    "ReflectorRequired",
    "PawlCountMismatch",
    "BadGeometry",
    "InvalidSetting",
    "AlphabetMismatch",
    "MalformedConfig",
    "InvalidSymbol",
]
