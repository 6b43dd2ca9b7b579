# alphabet_and_permutation.py
from __future__ import annotations

from collections.abc import Iterable
from debug import Debug
from errors import InvalidSymbol, MalformedAlphabet, MalformedPermutation

debug = Debug()

# symbols reserved by the cycle and settings-line formats; whitespace is allowed
# but can only ever be a fixed point
_RESERVED = set("()*")


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """An ordered set of distinct symbols numbered 0..size-1."""

    def __init__(self, chars: str | Iterable[str]) -> None:
        symbols = tuple(chars)
        if not symbols:
            raise MalformedAlphabet("Alphabet must hold at least one symbol")

        self._symbols: tuple[str, ...] = symbols
        self._to_index: dict[str, int] = {}
        for i, ch in enumerate(symbols):
            if len(ch) != 1 or ch in _RESERVED:
                raise MalformedAlphabet(f"Symbol {ch!r} cannot be used in an alphabet")
            if ch in self._to_index:
                raise MalformedAlphabet(f"Duplicate symbol {ch!r} in alphabet")
            self._to_index[ch] = i
        debug.log("alphabet", "built alphabet of %d symbols", len(symbols))

    def size(self) -> int:
        return len(self._symbols)

    def contains(self, symbol: str) -> bool:
        return symbol in self._to_index

    # symbol → integer signal
    def to_index(self, symbol: str) -> int:
        try:
            return self._to_index[symbol]
        except (KeyError, TypeError):
            raise InvalidSymbol(f"Invalid character {symbol!r} for current alphabet.") from None

    # integer signal → symbol
    def to_symbol(self, index: int) -> str:
        if not (0 <= index < len(self._symbols)):
            hi = len(self._symbols) - 1
            raise InvalidSymbol(f"Signal {index} out of range 0–{hi}")
        return self._symbols[index]

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    # ── niceties --------------------------------------------------
    __len__ = size
    __contains__ = contains

    def __iter__(self):
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"<Alphabet {self.symbols!r}>"


# ── Permutation ───────────────────────────────────────────────────
class Permutation:
    """A permutation of an alphabet given in cycle notation.

    ``"(ABC) (DE)"`` sends A→B→C→A and D↔E; symbols missing from every cycle
    map to themselves. Whitespace between cycles is ignored.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._cycles: list[str] = []
        self._placed: set[str] = set()

        for cycle in self._parse(cycles):
            self._add_cycle(cycle)

        # everything left over is a fixed point
        for ch in alphabet:
            if ch not in self._placed:
                self._cycles.append(ch)
                self._placed.add(ch)

        # integer lookup tables
        size = alphabet.size()
        self._fwd = [0] * size
        self._rev = [0] * size
        for cycle in self._cycles:
            for i, ch in enumerate(cycle):
                src = alphabet.to_index(ch)
                dst = alphabet.to_index(cycle[(i + 1) % len(cycle)])
                self._fwd[src] = dst
                self._rev[dst] = src

        debug.log("permutation", "%s", self)

    # ── parsing -------------------------------------------------
    @staticmethod
    def _parse(text: str) -> list[str]:
        found: list[str] = []
        current: list[str] | None = None
        for ch in text:
            if current is None:
                if ch.isspace():
                    continue
                if ch != "(":
                    raise MalformedPermutation(f"Expected '(' but found {ch!r} in {text!r}")
                current = []
            elif ch == "(":
                raise MalformedPermutation(f"Nested '(' in {text!r}")
            elif ch == ")":
                if not current:
                    raise MalformedPermutation(f"Empty cycle in {text!r}")
                found.append("".join(current))
                current = None
            elif ch.isspace():
                raise MalformedPermutation(f"Whitespace inside a cycle in {text!r}")
            else:
                current.append(ch)

        if current is not None:
            raise MalformedPermutation(f"Unterminated cycle in {text!r}")
        return found

    def _add_cycle(self, cycle: str) -> None:
        """Add c0→c1→…→cm→c0, refusing any symbol already placed."""
        for ch in cycle:
            if not self._alphabet.contains(ch):
                raise MalformedPermutation(f"Symbol {ch!r} is not in the alphabet")
            if ch in self._placed:
                raise MalformedPermutation(f"Symbol {ch!r} appears in more than one cycle")
            self._placed.add(ch)
        self._cycles.append(cycle)

    # ── algebra -------------------------------------------------
    def size(self) -> int:
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        """Return P modulo the alphabet size, always in 0..size-1."""
        return p % self.size()

    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    def permute_symbol(self, p: str) -> str:
        return self._alphabet.to_symbol(self.permute(self._alphabet.to_index(p)))

    def invert_symbol(self, c: str) -> str:
        return self._alphabet.to_symbol(self.invert(self._alphabet.to_index(c)))

    def derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        return all(len(cycle) > 1 for cycle in self._cycles)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def cycles(self) -> tuple[str, ...]:
        return tuple(self._cycles)

    def __repr__(self) -> str:
        shown = " ".join(f"({c})" for c in self._cycles if len(c) > 1)
        return f"<Permutation {shown or 'identity'}>"


__all__ = ["Alphabet", "Permutation"]
