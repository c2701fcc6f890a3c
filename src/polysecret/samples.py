"""Input documents and their decoding into points.

A document is a JSON object::

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}, ...}

Raw entries are parsed into strict EncodedSample records up front; decoding
them into integer Points is a separate step.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

from polysecret.digits import decode
from polysecret.errors import InputFormatError

logger = logging.getLogger(__name__)

KEYS_FIELD = 'keys'


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class EncodedSample:
    label: str
    base: object  # int or str, validated by digits.parse_base
    value: str


@dataclass(frozen=True)
class Document:
    n: int  # declared point count
    k: int  # required point count
    samples: tuple


def _parse_count(raw, name: str) -> int:
    if isinstance(raw, bool):
        raise InputFormatError("Invalid keys.n or keys.k")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        return int(raw.strip())
    raise InputFormatError(f"Invalid keys.n or keys.k: {name}={raw!r}")


def parse_label(label: str) -> int:
    """Point label -> x coordinate. Labels are non-negative decimal ints."""
    s = str(label).strip()
    if not (s.isascii() and s.isdigit()):
        raise InputFormatError(f"Invalid point label: {label!r}")
    return int(s)


def parse_document(data) -> Document:
    """Validate a decoded JSON object and collect its samples.

    Entries that are not objects or lack either 'base' or 'value' are
    skipped.
    """
    if not isinstance(data, Mapping):
        raise InputFormatError("Invalid JSON: top level must be an object")
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise InputFormatError("Invalid JSON: missing keys object")

    n = _parse_count(keys.get('n'), 'n')
    k = _parse_count(keys.get('k'), 'k')
    if k < 1:
        raise InputFormatError(f"Invalid keys.n or keys.k: k={k}")

    samples = []
    for label, entry in data.items():
        if label == KEYS_FIELD:
            continue
        if (not isinstance(entry, Mapping)
                or 'base' not in entry or 'value' not in entry):
            logger.debug("Skipping entry %r: not a base/value record", label)
            continue
        parse_label(label)
        samples.append(EncodedSample(str(label), entry['base'], str(entry['value'])))

    return Document(n=n, k=k, samples=tuple(samples))


def load_document(path: str) -> Document:
    """Read and parse a JSON input file."""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise InputFormatError(f"File not found: {path}") from None
    except OSError as e:
        raise InputFormatError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Failed to parse JSON: {e}") from e
    return parse_document(data)


def decode_sample(sample: EncodedSample) -> Point:
    return Point(parse_label(sample.label), decode(sample.value, sample.base))


def decode_samples(samples) -> list:
    """Decode every sample, failing on the first bad one."""
    points = [decode_sample(s) for s in samples]
    logger.debug("Decoded %d points", len(points))
    return points
