# machine.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import (
    AlphabetMismatch,
    BadGeometry,
    DuplicateRotor,
    InvalidSetting,
    InvalidSymbol,
    PawlCountMismatch,
    ReflectorRequired,
    UnknownRotor,
)
from rotor_and_reflector import Rotor

debug = Debug()


class Machine:
    """A complete rotor machine.

    Slots are numbered 1 (reflector, leftmost) to ``num_rotors`` (rightmost,
    fastest). The catalog of available rotors is kept by name and the slots
    hold names into it, so the same wheel can never sit in two slots.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Iterable[Rotor],
        *,
        double_advance: bool = True,
    ) -> None:
        if num_rotors <= 1:
            raise BadGeometry("Not enough rotor slots")
        if not 0 <= pawls < num_rotors:
            raise BadGeometry(f"Pawl count {pawls} must be in 0–{num_rotors - 1}")

        catalog: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.name in catalog:
                raise DuplicateRotor(f"Rotor {rotor.name!r} defined twice")
            if rotor.alphabet != alphabet:
                raise AlphabetMismatch(f"Rotor {rotor.name!r} uses a different alphabet")
            catalog[rotor.name] = rotor
        if len(catalog) < num_rotors:
            raise BadGeometry("More rotor slots than available rotors")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._num_pawls = pawls
        self._catalog = catalog
        self._slots: list[str] = []
        self._plugboard: Permutation | None = None
        self.double_advance = double_advance

    # ── geometry ────────────────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def num_rotors(self) -> int:
        return self._num_rotors

    @property
    def num_pawls(self) -> int:
        return self._num_pawls

    @property
    def catalog(self) -> dict[str, Rotor]:
        return dict(self._catalog)

    @property
    def plugboard(self) -> Permutation | None:
        return self._plugboard

    @property
    def slots(self) -> tuple[str, ...]:
        return tuple(self._slots)

    def rotor_at(self, slot: int) -> Rotor:
        """Return the rotor in SLOT (1-based)."""
        if not self._slots:
            raise InvalidSetting("No rotors inserted")
        if not 1 <= slot <= self._num_rotors:
            raise IndexError(f"Slot {slot} out of range 1–{self._num_rotors}")
        return self._catalog[self._slots[slot - 1]]

    def positions(self) -> str:
        """Window letters of slots 2..N, left to right."""
        return "".join(
            self._alphabet.to_symbol(self.rotor_at(s).setting)
            for s in range(2, self._num_rotors + 1)
        )

    # ── configuration ───────────────────────────────────────────
    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill the slots with the catalog rotors NAMES (NAMES[0] = reflector)."""
        if len(names) != self._num_rotors:
            raise BadGeometry(f"Need exactly {self._num_rotors} rotor names, got {len(names)}")

        chosen: list[str] = []
        moving = 0
        for slot, name in enumerate(names, start=1):
            rotor = self._catalog.get(name)
            if rotor is None:
                raise UnknownRotor(f"Rotor {name!r} is not in the catalog")
            if slot == 1 and not rotor.reflects():
                raise ReflectorRequired(f"First rotor must reflect, {name!r} does not")
            if name in chosen:
                raise DuplicateRotor(f"Rotor {name!r} already in use")
            if rotor.rotates():
                moving += 1
            chosen.append(name)

        if moving != self._num_pawls:
            raise PawlCountMismatch(f"{moving} moving rotors given for {self._num_pawls} pawls")

        self._slots = chosen
        for name in chosen:
            self._catalog[name].set(0)
        debug.log("config", "slots %s", chosen)

    def _check_setting(self, setting: str, what: str) -> None:
        if not self._slots:
            raise InvalidSetting("No rotors inserted")
        if len(setting) != self._num_rotors - 1:
            raise InvalidSetting(
                f"{what} must have {self._num_rotors - 1} symbols, got {setting!r}"
            )
        for ch in setting:
            if not self._alphabet.contains(ch):
                raise InvalidSetting(f"{what} symbol {ch!r} is not in the alphabet")

    def set_rotors(self, setting: str) -> None:
        """Turn slots 2..N to SETTING, leftmost first."""
        self._check_setting(setting, "Rotor setting")
        for slot, ch in enumerate(setting, start=2):
            self.rotor_at(slot).set(ch)

    def set_rings(self, rings: str) -> None:
        """Apply ring offsets RINGS to slots 2..N."""
        self._check_setting(rings, "Ring setting")
        for slot, ch in enumerate(rings, start=2):
            self.rotor_at(slot).set_ring(ch)

    def reset_rings(self) -> None:
        """Zero the ring of every rotor in the catalog, inserted or not."""
        for rotor in self._catalog.values():
            rotor.set_ring(0)

    def set_plugboard(self, plugboard: Permutation | None) -> None:
        if plugboard is not None and plugboard.alphabet != self._alphabet:
            raise AlphabetMismatch("Plugboard alphabet differs from machine alphabet")
        self._plugboard = plugboard

    # ── stepping logic  ─────────────────────────────────────────
    def _step_rotors(self) -> None:
        """Advance rotors for one key-press."""
        n = self._num_rotors
        stepped = {n}

        right = self.rotor_at(n)
        right_at_notch = right.at_notch()
        right.advance()

        for slot in range(n - 1, 1, -1):
            curr = self.rotor_at(slot)
            curr_at_notch = curr.at_notch()
            if curr.rotates() and right_at_notch:
                curr.advance()
                stepped.add(slot)
                if slot + 1 < n and (self.double_advance or slot + 1 not in stepped):
                    self.rotor_at(slot + 1).advance()
            right_at_notch = curr_at_notch

        if debug.is_on("stepping"):
            debug.log("stepping", "positions %s", self.positions())

    def _plug(self, c: int) -> int:
        return c if self._plugboard is None else self._plugboard.permute(c)

    # ── encipher one symbol  ────────────────────────────────────
    def convert_index(self, c: int) -> int:
        """Advance the machine, then route signal C through it."""
        self._step_rotors()

        signal = self._plug(c)
        for slot in range(self._num_rotors, 0, -1):
            signal = self.rotor_at(slot).convert_forward(signal)
        for slot in range(1, self._num_rotors + 1):
            rotor = self.rotor_at(slot)
            if rotor.reflects():
                continue
            signal = rotor.convert_backward(signal)
        out = self._plug(signal)

        debug.log("signal", "%d->%d", c, out)
        return out

    def convert(self, msg: str) -> str:
        """Encode or decode MSG, stepping once per symbol."""
        for ch in msg:
            if not self._alphabet.contains(ch):
                raise InvalidSymbol(f"Message contains {ch!r}, which is not in the alphabet")
        to_index, to_symbol = self._alphabet.to_index, self._alphabet.to_symbol
        return "".join(to_symbol(self.convert_index(to_index(ch))) for ch in msg)

    def __repr__(self) -> str:
        shown = " ".join(self._slots) or "empty"
        return f"<Machine {self._num_rotors} slots/{self._num_pawls} pawls [{shown}]>"


__all__ = ["Machine"]
