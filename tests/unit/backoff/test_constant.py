r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff.constant import ConstantBackoff


def test_constant_backoff_basic() -> None:
    """Test that the delay does not depend on the attempt."""
    backoff = ConstantBackoff(delay=500)
    assert backoff.calculate(1) == 500
    assert backoff.calculate(2) == 500
    assert backoff.calculate(100) == 500


def test_constant_backoff_default_value() -> None:
    assert ConstantBackoff().delay == 0
    assert ConstantBackoff().calculate(1) == 0


def test_constant_backoff_invalid_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(delay=-1)
