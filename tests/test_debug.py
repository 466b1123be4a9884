# FILE: tests/test_debug.py
import logging

import pytest

import rotor_and_reflector
from debug import Debug
from rotor_and_reflector import Rotor


def test_components_start_disabled():
    dbg = Debug()
    assert not any(dbg.status().values())


def test_unknown_component():
    with pytest.raises(ValueError):
        Debug().enable("plugboard")


def test_enabled_component_logs(caplog):
    rotor_and_reflector.debug.enable("stepping")
    try:
        with caplog.at_level(logging.DEBUG, logger="ENIGMA"):
            Rotor("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q").rotate()
    finally:
        rotor_and_reflector.debug.disable("stepping")
    assert "[STEPPING] Rotor offset 1" in caplog.text


def test_global_switch_silences(caplog):
    dbg = Debug()
    dbg.enable("rotor")
    dbg.toggle_global(False)
    with caplog.at_level(logging.DEBUG, logger="ENIGMA"):
        dbg.log("rotor", "quiet")
    assert "quiet" not in caplog.text


def test_unknown_component_changes_nothing():
    dbg = Debug()
    with pytest.raises(ValueError):
        dbg.enable("rotor", "plugboard")
    assert dbg.status()["rotor"] is False
