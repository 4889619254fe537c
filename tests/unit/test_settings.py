"""Unit tests for machine settings and the wheel database."""

from __future__ import annotations

import dataclasses

import pytest

from errors import ConfigurationError, InvalidReflectorError, InvalidWiringError
from settings import MachineSettings
from wheels import REFLECTORS, ROTORS, reference_settings, settings_for


def test_reference_settings_hold_integer_tables() -> None:
    settings = reference_settings()

    assert settings.rotor_wirings[0][:5] == (4, 10, 12, 5, 11)
    assert settings.notches == (16, 4, 21)
    assert settings.reflector[:3] == (24, 17, 20)
    assert settings.start == "mck"


def test_build_returns_independent_fresh_machines() -> None:
    settings = reference_settings()
    first = settings.build()
    second = settings.build()

    assert first.encode("enigmarevealed") == "qmjidomzwzsfjr"
    assert second.offsets == (12, 2, 10)
    assert second.encode("qmjidomzwzsfjr") == "enigmarevealed"
    assert first.rotors[0] is not second.rotors[0]


def test_identical_settings_give_identical_output() -> None:
    text = "identicalparametersidenticaloutput"
    a = settings_for(("IV", "II", "V"), "C", "xyz").build()
    b = settings_for(("iv", "ii", "v"), "c", "xyz").build()

    assert a.encode(text) == b.encode(text)


def test_settings_are_frozen() -> None:
    settings = reference_settings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.start = "aaa"  # type: ignore[misc]


def test_with_start_keeps_wheels() -> None:
    settings = reference_settings().with_start("aaa")

    assert settings.start == "aaa"
    assert settings.build().encode("aaaaa") == "bdzgo"


def test_lists_are_normalised_to_tuples() -> None:
    base = reference_settings()
    settings = MachineSettings(
        [list(w) for w in base.rotor_wirings],  # type: ignore[arg-type]
        list(base.notches),  # type: ignore[arg-type]
        list(base.reflector),  # type: ignore[arg-type]
        "mck",
    )

    assert settings == base
    assert hash(settings) == hash(base)


def test_bad_wiring_fails_when_settings_are_created() -> None:
    base = reference_settings()
    broken = (base.rotor_wirings[0], base.rotor_wirings[1], (0,) * 26)

    with pytest.raises(InvalidWiringError):
        MachineSettings(broken, base.notches, base.reflector, "mck")


def test_bad_reflector_fails_when_settings_are_created() -> None:
    base = reference_settings()

    with pytest.raises(InvalidReflectorError):
        MachineSettings(base.rotor_wirings, base.notches, tuple(range(26)), "mck")


@pytest.mark.parametrize("start", ["mc", "mckk", "MCK", "m1k"])
def test_bad_start_rejected(start: str) -> None:
    base = reference_settings()

    with pytest.raises(InvalidWiringError):
        base.with_start(start)


def test_rotor_count_is_fixed_at_three() -> None:
    base = reference_settings()

    with pytest.raises(InvalidWiringError, match="three"):
        MachineSettings(base.rotor_wirings[:2], base.notches[:2], base.reflector)  # type: ignore[arg-type]


def test_unknown_wheel_name() -> None:
    with pytest.raises(ConfigurationError, match="Unknown wheel"):
        settings_for(("I", "II", "IX"), "B")
    with pytest.raises(ConfigurationError, match="Unknown wheel"):
        settings_for(("I", "II", "III"), "Z")


@pytest.mark.parametrize("name", sorted(ROTORS))
def test_database_rotors_are_valid(name: str) -> None:
    settings = settings_for((name, "I", "II"), "B")

    assert sorted(settings.rotor_wirings[0]) == list(range(26))


@pytest.mark.parametrize("name", sorted(REFLECTORS))
def test_database_reflectors_are_valid(name: str) -> None:
    settings = settings_for(("I", "II", "III"), name)
    refl = settings.reflector

    assert all(refl[refl[i]] == i and refl[i] != i for i in range(26))
