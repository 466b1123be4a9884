# FILE: tests/test_signal_path.py
"""Compose the core pieces the way a full machine would (no stepping)."""
from catalog import get_reflector, get_rotor
from keyboard import ALPHABET


def _pass(letter, rotors, reflector):
    # rotors listed left to right; the signal enters on the right
    for rotor in reversed(rotors):
        letter = rotor.step(letter)
    letter = reflector.reflect(letter)
    for rotor in rotors:
        letter = rotor.step(letter, invert=True)
    return letter


def _machine():
    return [get_rotor("III"), get_rotor("II"), get_rotor("I")], get_reflector("B")


def test_chain_is_self_inverse():
    rotors, reflector = _machine()
    cipher = _pass("A", rotors, reflector)
    assert cipher != "A"
    assert _pass(cipher, rotors, reflector) == "A"


def test_no_letter_encrypts_to_itself():
    rotors, reflector = _machine()
    for offsets in [(0, 0, 0), (3, 11, 25), (16, 4, 21)]:
        for rotor, offset in zip(rotors, offsets):
            rotor.offset = offset
        for ch in ALPHABET:
            out = _pass(ch, rotors, reflector)
            assert out != ch
            assert _pass(out, rotors, reflector) == ch
