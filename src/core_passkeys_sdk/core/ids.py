"""Correlation and trace identifier generation."""

from __future__ import annotations

import random
import time
import uuid

from ..telemetry import get_logger

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _pseudo_random_uuid4() -> str:
    """Version-4 UUID from the non-cryptographic generator."""
    return str(uuid.UUID(int=random.getrandbits(128), version=4))


def _time_based_id() -> str:
    """Last-resort identifier: millisecond clock plus whatever entropy is left."""
    millis = _to_base36(time.time_ns() // 1_000_000)
    return millis + _to_base36(id(object()) ^ time.perf_counter_ns())


def generate_uuid() -> str:
    """Generate a version-4 UUID string.

    Prefers the OS random source (``uuid4`` raises ``NotImplementedError``
    when the platform has none). Falls back to a pseudo-random UUID with
    valid version/variant bits. CPython's ``random.getrandbits`` does not
    raise, so the time-derived last resort only runs on interpreters or
    embedders that replace ``random`` with a generator that can fail.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        get_logger().warning("OS random source unavailable, using pseudo-random UUID")

    try:
        return _pseudo_random_uuid4()
    except (NotImplementedError, OSError):
        get_logger().warning("No random source available, using time-based identifier")
        return _time_based_id()
