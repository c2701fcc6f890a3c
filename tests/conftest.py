"""Shared fixtures for polysecret tests."""

import json
import random
import pytest


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def scenario_a():
    """Mixed-base 7-of-10 set; labels 2 and 8 are not supplied."""
    return {
        "keys": {"n": 10, "k": 7},
        "1": {"base": "6", "value": "13444211440455345511"},
        "3": {"base": "15", "value": "6aeeb69631c227c"},
        "4": {"base": "16", "value": "e1b5e05623d881f"},
        "5": {"base": "8", "value": "316034514573652620673"},
        "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
        "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
        "9": {"base": "12", "value": "45153788322a1255483"},
        "10": {"base": "7", "value": "1101613130313526312514143"},
    }


@pytest.fixture
def scenario_b():
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def non_integer_doc():
    """(1,0), (2,0), (4,1) interpolate to 1/3 at zero."""
    return {
        "keys": {"n": 3, "k": 3},
        "1": {"base": "10", "value": "0"},
        "2": {"base": "10", "value": "0"},
        "4": {"base": "10", "value": "1"},
    }


@pytest.fixture
def write_doc(tmp_path):
    """Write a document to a JSON file and return its path."""
    def _write(data, name="input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)
    return _write
