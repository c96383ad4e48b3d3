"""Unit tests for ExecutionContext."""

from datetime import UTC, datetime

import pytest
from freezegun import freeze_time

from poap.domain.value_objects import ExecutionContext


@pytest.mark.unit
class TestExecutionContext:
    """Test ExecutionContext value object."""

    @freeze_time("2024-01-01 12:00:00")
    def test_now_uses_wall_clock_seconds(self):
        ctx = ExecutionContext.now("owner")

        assert ctx.sender == "owner"
        assert ctx.block_time == int(datetime(2024, 1, 1, 12, tzinfo=UTC).timestamp())

    def test_occurred_at_is_utc(self):
        ctx = ExecutionContext(sender="owner", block_time=150)

        assert ctx.occurred_at == datetime(1970, 1, 1, 0, 2, 30, tzinfo=UTC)

    def test_negative_block_time_rejected(self):
        with pytest.raises(ValueError, match="block_time"):
            ExecutionContext(sender="owner", block_time=-1)
