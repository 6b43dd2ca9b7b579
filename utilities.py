# utilities.py
from __future__ import annotations

import re
from typing import Iterable, List

from alphabet_and_permutation import Alphabet
from rotor_and_reflector import Rotor

_num_re = re.compile(r"^([A-Za-z]+)(\d+)$")
_ROMAN = {"I": 1, "II": 2, "III": 3, "IV": 4, "V": 5, "VI": 6, "VII": 7, "VIII": 8}


def _nat_key(name: str):
    """Natural‑sort rotor names so I, II, III, …, VIII, then R1, R2, …, then Beta…"""
    if name in _ROMAN:
        return (0, "", _ROMAN[name])
    m = _num_re.match(name)
    if m:
        prefix, num = m.groups()
        return (1, prefix, int(num))
    return (2, name, 0)


def role_of(rotor: Rotor) -> str:
    if rotor.reflects():
        return "reflector"
    return "moving" if rotor.rotates() else "fixed"


def describe_rotors(rotors: Iterable[Rotor]) -> List[str]:
    """One line per rotor, grouped by role, names in natural order."""
    order = {"reflector": 0, "fixed": 1, "moving": 2}
    ranked = sorted(rotors, key=lambda r: (order[role_of(r)], _nat_key(r.name)))
    return [f"{r.name:<6} {role_of(r)}" for r in ranked]


# ────────────────────────────────────────────────────────────────────────
#  Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, alpha: Alphabet) -> str:
    """Drop whitespace and fold case onto the alphabet where that helps.

    Anything else is left alone, so the machine still rejects symbols it
    does not know.
    """
    out = []
    for ch in msg:
        if ch in alpha:
            out.append(ch)
        elif ch.isspace():
            continue
        elif ch.upper() in alpha:
            out.append(ch.upper())
        elif ch.lower() in alpha:
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def format_blocks(text: str, block: int = 5) -> str:
    """Split TEXT into groups of BLOCK symbols separated by single spaces."""
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


__all__ = ["describe_rotors", "role_of", "preprocess_message", "format_blocks"]
