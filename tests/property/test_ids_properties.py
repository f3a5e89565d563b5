"""Property-based tests for identifier generation.

- Strong source yields distinct version-4 UUIDs
- Fallbacks engage only when the preceding source is unavailable
"""

from __future__ import annotations

import re
import uuid
from unittest.mock import patch

from hypothesis import given, settings
from hypothesis import strategies as st

from core_passkeys_sdk.core import ids
from core_passkeys_sdk.core.ids import generate_uuid

UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class TestGenerateUuid:
    @given(count=st.integers(min_value=2, max_value=50))
    @settings(max_examples=50)
    def test_distinct_uuid4_values(self, count: int) -> None:
        values = [generate_uuid() for _ in range(count)]

        assert len(set(values)) == count
        assert all(UUID4_PATTERN.match(value) for value in values)

    @given(bits=st.integers(min_value=0, max_value=2**128 - 1))
    @settings(max_examples=100)
    def test_pseudo_random_fallback_is_uuid4(self, bits: int) -> None:
        with (
            patch.object(ids.uuid, "uuid4", side_effect=NotImplementedError),
            patch.object(ids.random, "getrandbits", return_value=bits),
        ):
            value = generate_uuid()

        assert UUID4_PATTERN.match(value)
        assert uuid.UUID(value).version == 4

    def test_time_based_last_resort(self) -> None:
        with (
            patch.object(ids.uuid, "uuid4", side_effect=NotImplementedError),
            patch.object(ids.random, "getrandbits", side_effect=NotImplementedError),
        ):
            value = generate_uuid()

        assert value
        assert re.fullmatch(r"[0-9a-z]+", value)
        assert not UUID4_PATTERN.match(value)

    def test_base36(self) -> None:
        assert ids._to_base36(0) == "0"
        assert ids._to_base36(35) == "z"
        assert ids._to_base36(36) == "10"
