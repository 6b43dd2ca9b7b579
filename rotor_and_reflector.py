# rotor_and_reflector.py
from __future__ import annotations

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug

debug = Debug()


class Rotor:
    """A wheel wired by a permutation, with an angular setting and a ring.

    The base class neither rotates nor reflects; it is the behaviour of a
    fixed (non-pawled) rotor.
    """

    def __init__(self, name: str, perm: Permutation) -> None:
        self.name = name
        self.permutation = perm
        self.setting = 0
        self.ring = 0

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    def size(self) -> int:
        return self.permutation.size()

    # ── capabilities ---------------------------------------------
    def rotates(self) -> bool:
        return False

    def reflects(self) -> bool:
        return False

    def at_notch(self) -> bool:
        return False

    def advance(self) -> None:
        pass

    # ── setting & ring -------------------------------------------
    def _as_index(self, value: int | str) -> int:
        if isinstance(value, str):
            return self.alphabet.to_index(value)
        return self.permutation.wrap(value)

    def set(self, value: int | str) -> None:
        """Turn to VALUE, a symbol or a raw index (wrapped)."""
        self.setting = self._as_index(value)

    def set_ring(self, value: int | str) -> None:
        self.ring = self._as_index(value)

    # ── signal paths ---------------------------------------------
    def convert_forward(self, contact: int) -> int:
        offset = self.setting - self.ring
        mapped = self.permutation.permute(self.permutation.wrap(contact + offset))
        out = self.permutation.wrap(mapped - offset)
        debug.log("rotor", "%s fwd %d->%d", self.name, contact, out)
        return out

    def convert_backward(self, contact: int) -> int:
        offset = self.setting - self.ring
        mapped = self.permutation.invert(self.permutation.wrap(contact + offset))
        out = self.permutation.wrap(mapped - offset)
        debug.log("rotor", "%s bwd %d->%d", self.name, contact, out)
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        kind = type(self).__name__
        return f"<{kind} {self.name} pos={self.setting} ring={self.ring}>"


class FixedRotor(Rotor):
    """A rotor with no pawl: it can be set but never steps."""


class MovingRotor(Rotor):
    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        # frozen against the ring in place right now; set_ring never moves them
        self.notches: frozenset[int] = frozenset(
            perm.wrap(self.alphabet.to_index(ch) - self.ring) for ch in notches
        )

    def rotates(self) -> bool:
        return True

    def at_notch(self) -> bool:
        return self.setting in self.notches

    def advance(self) -> None:
        # the ring offset widens the step as well as shifting the contacts
        self.set(self.setting + 1 + self.ring)
        debug.log("stepping", "%s -> %s", self.name, self.alphabet.to_symbol(self.setting))


class Reflector(Rotor):
    """Slot-1 wheel: folds the signal back through the stack."""

    def reflects(self) -> bool:
        return True


__all__ = ["Rotor", "FixedRotor", "MovingRotor", "Reflector"]
