# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterator
from copy import copy

from alphabet import ALPHABET
from debug import Debug
from errors import ConfigurationError
from rotor_and_reflector import Reflector, Rotor

debug = Debug()
debug.disable("stepping", "encode")


def _advance(left: Rotor, middle: Rotor, right: Rotor) -> None:
    """One key-press worth of stepping.

    The right wheel always moves. A wheel moves when its right neighbour
    turned over on this press, or when it was already sitting on its own
    notch before the press (the double step).
    """
    # sampled before anything moves
    middle_on_notch = middle.at_notch()
    left_on_notch = left.at_notch()

    carry = right.step()
    carry = middle.step() if (carry or middle_on_notch) else False
    if carry or left_on_notch:
        left.step()


class EnigmaMachine:
    """Three rotors and a fixed reflector.

    ``rotor1`` sits next to the reflector, ``rotor3`` next to the keyboard.
    The machine is not safe to drive from two ``encode`` calls at once: the
    calls would interleave stepping and corrupt the offset sequence. Give each
    caller its own machine.
    """

    def __init__(self, rotor1: Rotor, rotor2: Rotor, rotor3: Rotor, reflector: Reflector) -> None:
        rotors = [rotor1, rotor2, rotor3]
        if len({id(r) for r in rotors}) != len(rotors):
            raise ConfigurationError("The same rotor cannot fill two slots")
        for slot, rotor in enumerate(rotors, 1):
            if rotor.owner is not None:
                raise ConfigurationError(f"rotor{slot} already belongs to another machine")
        for rotor in rotors:
            rotor.owner = self

        self.rotors = rotors
        self.reflector = reflector

    @property
    def offsets(self) -> tuple[int, int, int]:
        left, middle, right = self.rotors
        return left.offset, middle.offset, right.offset

    @property
    def window(self) -> str:
        return "".join(r.window for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        _advance(*self.rotors)
        debug.log("stepping", f"offsets {self.offsets}")

    def upcoming_offsets(self) -> Iterator[tuple[int, int, int]]:
        """Yield the offsets after each of the next key presses, forever.

        Works on shadow copies, so the machine itself does not move and every
        call starts again from the current state.
        """
        shadow = [copy(r) for r in self.rotors]
        while True:
            _advance(*shadow)
            yield tuple(r.offset for r in shadow)

    # ── encipher  ───────────────────────────────────────────────

    def _encode_position(self, signal: int) -> int:
        left, middle, right = self.rotors

        signal = right.forward_pass(signal)
        signal = middle.forward_pass(signal)
        signal = left.forward_pass(signal)

        signal = self.reflector.reflect(signal)

        signal = left.reverse_pass(signal)
        signal = middle.reverse_pass(signal)
        signal = right.reverse_pass(signal)
        return signal

    def encode(self, text: str) -> str:
        """Encipher *text* (lowercase a-z only), stepping before each letter.

        The whole input is checked first, so a rejected call leaves the
        rotors where they were. Offsets are not reset between calls.
        """
        ALPHABET.validate(text)

        out: list[str] = []
        for ch in text:
            self._step_rotors()
            out_ch = ALPHABET.to_letter(self._encode_position(ALPHABET.to_position(ch)))
            debug.log("encode", f"{ch}->{out_ch} window={self.window}")
            out.append(out_ch)
        return "".join(out)

    def __repr__(self) -> str:
        return f"<EnigmaMachine window={self.window!r} offsets={self.offsets}>"
