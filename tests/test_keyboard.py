# FILE: tests/test_keyboard.py
import pytest

from keyboard import ALPHABET, Keyboard, to_char, to_int


def test_letter_positions():
    assert to_int("A") == 0
    assert to_int("Z") == 25
    assert [to_char(i) for i in range(26)] == list(ALPHABET)


def test_lowercase_is_rejected():
    with pytest.raises(ValueError):
        to_int("a")


def test_signal_out_of_range():
    with pytest.raises(ValueError):
        to_char(26)
    with pytest.raises(ValueError):
        to_char(-1)


def test_keyboard_object_form():
    kb = Keyboard()
    assert kb.forward("Q") == 16
    assert kb.backward(16) == "Q"
