"""
Component-gated debug logging
=============================
"""

import logging

import pytest

from debug import Debug
from machine import build_machine
from config import ConfigRecord
import machine


def test_unknown_component():
    with pytest.raises(ValueError):
        Debug().enable("warp-drive")

def test_components_start_muted():
    assert not any(Debug().status().values())

def test_toggle_and_global_switch():
    d = Debug()
    d.toggle("rotor")
    assert d.is_on("rotor")
    d.toggle_global(False)
    assert not d.is_on("rotor")

def test_encipher_logging(caplog, monkeypatch):
    monkeypatch.setitem(machine.debug.components, "encipher", True)
    with caplog.at_level(logging.DEBUG, logger="ESD"):
        build_machine(ConfigRecord(blocks=["КБ"])).transform("a")
    assert "[ENCIPHER] 'a' -> 't'" in caplog.text
