# settings.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from errors import InvalidWiringError
from machine import EnigmaMachine
from rotor_and_reflector import Reflector, Rotor


@dataclass(slots=True, frozen=True)
class MachineSettings:
    """Everything needed to build a machine, kept as plain immutable data.

    Order is rotor1, rotor2, rotor3 (reflector side first), matching
    ``start`` read left to right as the window letters.
    """

    rotor_wirings: tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]
    notches: tuple[int, int, int]
    reflector: tuple[int, ...]
    start: str = "aaa"

    def __post_init__(self) -> None:
        wirings = tuple(tuple(w) for w in self.rotor_wirings)
        notches = tuple(self.notches)
        if len(wirings) != 3 or len(notches) != 3:
            raise InvalidWiringError("Exactly three rotor wirings and three notches are required")
        if len(self.start) != 3:
            raise InvalidWiringError(f"Need three start letters, got {self.start!r}")

        object.__setattr__(self, "rotor_wirings", wirings)
        object.__setattr__(self, "notches", notches)
        object.__setattr__(self, "reflector", tuple(self.reflector))

        self.build()     # fail now, not on first use

    @classmethod
    def from_letters(
        cls,
        rotor_wirings: Sequence[str],
        notches: Sequence[str],
        reflector: str,
        start: str = "aaa",
    ) -> "MachineSettings":
        """Same as the constructor, with wiring and notches given as letters."""
        rotors = [Rotor.from_letters(w, n) for w, n in zip(rotor_wirings, notches)]
        refl = Reflector.from_letters(reflector)
        return cls(
            tuple(r.wiring for r in rotors),
            tuple(r.notch for r in rotors),
            refl.wiring,
            start,
        )

    def build(self) -> EnigmaMachine:
        """Return a fresh machine at the start position; each call is independent."""
        rotors = [
            Rotor(wiring, notch, letter)
            for wiring, notch, letter in zip(self.rotor_wirings, self.notches, self.start)
        ]
        return EnigmaMachine(*rotors, Reflector(self.reflector))

    def with_start(self, start: str) -> "MachineSettings":
        return MachineSettings(self.rotor_wirings, self.notches, self.reflector, start)
