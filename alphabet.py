# alphabet.py
from __future__ import annotations

import string

from debug import Debug
from errors import InvalidCharacterError

debug = Debug()
debug.disable("alphabet")

LETTERS: str = string.ascii_lowercase
SIZE: int = len(LETTERS)


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """Fixed a-z <-> 0..25 bijection. Lowercase only, nothing else."""

    def __init__(self, letters: str = LETTERS) -> None:
        self.letters: str = letters
        self.size: int = len(letters)
        self.letter_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(letters)
        }

    # letter → integer position
    def to_position(self, letter: str) -> int:
        try:
            return self.letter_to_index[letter]
        except KeyError:
            raise InvalidCharacterError(letter) from None

    # integer position → letter
    def to_letter(self, position: int) -> str:
        if not (0 <= position < self.size):
            raise ValueError(f"Position {position} out of range 0-{self.size - 1}")
        return self.letters[position]

    def validate(self, text: str) -> None:
        """Reject *text* at the first character outside the alphabet."""
        for i, ch in enumerate(text):
            if ch not in self.letter_to_index:
                debug.log("alphabet", f"rejecting {ch!r} at {i}")
                raise InvalidCharacterError(ch, i)

    def __contains__(self, letter: object) -> bool:
        return letter in self.letter_to_index

    def __repr__(self) -> str:
        return f"<Alphabet {self.letters[0]}..{self.letters[-1]} size={self.size}>"


ALPHABET = Alphabet()
