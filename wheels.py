# wheels.py
from __future__ import annotations

from typing import Dict, Tuple

from errors import ConfigurationError
from settings import MachineSettings

# ────────────────────────────────────────────────────────────────────────
#  Wheel database (historical Wehrmacht wiring, lowercase)
# ────────────────────────────────────────────────────────────────────────

# name -> (wiring, notch letter)
ROTORS: Dict[str, Tuple[str, str]] = {
    "I":   ("ekmflgdqvzntowyhxuspaibrcj", "q"),
    "II":  ("ajdksiruxblhwtmcqgznpyfvoe", "e"),
    "III": ("bdfhjlcprtxvznyeiwgakmusqo", "v"),
    "IV":  ("esovpzjayquirhxlnftgkdcmwb", "j"),
    "V":   ("vzbrgityupsdnhlxawmjqofeck", "z"),
}

REFLECTORS: Dict[str, str] = {
    "A": "ejmzalyxvbwfcrquontspikhgd",
    "B": "yruhqsldpxngokmiebfzcwvjat",
    "C": "fvpjiaoyedrzxwgctkuqsbnmhl",
}


def settings_for(
    rotors: Tuple[str, str, str],
    reflector: str,
    start: str = "aaa",
) -> MachineSettings:
    """Look wheels up by name (case-insensitive) and bundle them into settings."""
    try:
        picked = [ROTORS[name.upper()] for name in rotors]
        refl = REFLECTORS[reflector.upper()]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown wheel {exc.args[0]!r}. Rotors: {list(ROTORS)}, reflectors: {list(REFLECTORS)}"
        ) from None

    return MachineSettings.from_letters(
        [wiring for wiring, _ in picked],
        [notch for _, notch in picked],
        refl,
        start,
    )


def reference_settings() -> MachineSettings:
    """Rotors I, II, III with reflector B, starting at "mck"."""
    return settings_for(("I", "II", "III"), "B", "mck")


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "settings_for",
    "reference_settings",
]
