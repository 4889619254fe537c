# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Sequence

from alphabet import ALPHABET
from debug import Debug
from errors import InvalidReflectorError, InvalidWiringError

debug = Debug()
debug.disable("rotor", "reflector")


def _check_permutation(wiring: Sequence[int], what: str) -> tuple[int, ...]:
    table = tuple(wiring)
    if len(table) != ALPHABET.size:
        raise InvalidWiringError(
            f"{what} wiring must have {ALPHABET.size} entries, got {len(table)}"
        )
    for i, value in enumerate(table):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidWiringError(f"{what} wiring entry {i} is not an integer: {value!r}")
        if not (0 <= value < ALPHABET.size):
            raise InvalidWiringError(f"{what} wiring entry {i} out of range: {value}")
    if len(set(table)) != len(table):
        dup = next(v for v in table if table.count(v) > 1)
        raise InvalidWiringError(f"{what} wiring maps two contacts to {dup}")
    return table


class Rotor:
    def __init__(self, wiring: Sequence[int], notch: int, start: str = "a") -> None:
        self.wiring = _check_permutation(wiring, "Rotor")
        self.size = ALPHABET.size

        # inverse lookup, built once; the tables never move, only offset does
        inverse = [0] * self.size
        for contact, out in enumerate(self.wiring):
            inverse[out] = contact
        self._rev = tuple(inverse)

        if not isinstance(notch, int) or isinstance(notch, bool) or not (0 <= notch < self.size):
            raise InvalidWiringError(f"Notch must be in 0-{self.size - 1}, got {notch!r}")
        if start not in ALPHABET:
            raise InvalidWiringError(f"Start position {start!r} is not a letter a-z")

        self.notch = notch
        self.offset = ALPHABET.to_position(start)
        self.owner: object | None = None    # the machine this rotor is mounted in

    @classmethod
    def from_letters(cls, wiring: str, notch: str | int, start: str = "a") -> "Rotor":
        """Build from the historical letter form, e.g. ("ekmflgdqvzntowyhxuspaibrcj", "q")."""
        try:
            table = [ALPHABET.to_position(c) for c in wiring]
            if isinstance(notch, str):
                notch = ALPHABET.to_position(notch)
        except ValueError as exc:
            raise InvalidWiringError(f"Rotor wiring/notch letters must be a-z: {exc}") from exc
        return cls(table, notch, start)

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True on arriving at the notch (turnover)."""
        self.offset = (self.offset + 1) % self.size
        hit = self.at_notch()
        debug.log("rotor", f"offset {self.offset}, notch_hit={hit}")
        return hit

    def at_notch(self) -> bool:
        return self.offset == self.notch

    @property
    def window(self) -> str:
        return ALPHABET.to_letter(self.offset)

    # ── signal paths ---------------------------------------------
    def forward_pass(self, position: int) -> int:
        self._require(position)
        shifted = (position + self.offset) % self.size
        mapped = self.wiring[shifted]
        return (mapped - self.offset + self.size) % self.size

    def reverse_pass(self, position: int) -> int:
        self._require(position)
        shifted = (position + self.offset) % self.size
        mapped = self._rev[shifted]
        return (mapped - self.offset + self.size) % self.size

    def _require(self, position: int) -> None:
        if not (0 <= position < self.size):
            raise ValueError(f"Position {position} out of range 0-{self.size - 1}")

    def __repr__(self) -> str:
        return f"<Rotor offset={self.offset} window={self.window!r} notch={self.notch}>"


class Reflector:
    def __init__(self, wiring: Sequence[int]) -> None:
        table = _check_permutation(wiring, "Reflector")

        # involution (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, j in enumerate(table):
            if i == j:
                raise InvalidReflectorError(f"Reflector maps contact {i} to itself")
            if table[j] != i:
                raise InvalidReflectorError(
                    f"Reflector is not an involution: {i}->{j} but {j}->{table[j]}"
                )

        self.wiring = table
        self.size = len(table)

    @classmethod
    def from_letters(cls, wiring: str) -> "Reflector":
        try:
            table = [ALPHABET.to_position(c) for c in wiring]
        except ValueError as exc:
            raise InvalidWiringError(f"Reflector wiring letters must be a-z: {exc}") from exc
        return cls(table)

    def reflect(self, position: int) -> int:
        if not (0 <= position < self.size):
            raise ValueError(f"Position {position} out of range 0-{self.size - 1}")
        mapped = self.wiring[position]
        debug.log("reflector", f"{position}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        pairs = [f"{ALPHABET.to_letter(i)}{ALPHABET.to_letter(j)}"
                 for i, j in enumerate(self.wiring) if i < j]
        return f"<Reflector {' '.join(pairs)}>"
