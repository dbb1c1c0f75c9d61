r"""Unit tests for LinearBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff.linear import LinearBackoff


@pytest.mark.parametrize(
    ("base_delay", "multiplier", "expected"),
    [(100, 2.0, 200), (100, 2.5, 250), (3, 1.5, 4), (10, 0.33, 3), (0, 5.0, 0)],
)
def test_linear_backoff_floors_scaled_delay(
    base_delay: int, multiplier: float, expected: int
) -> None:
    assert LinearBackoff(base_delay=base_delay, multiplier=multiplier).calculate(1) == expected


def test_linear_backoff_ignores_attempt() -> None:
    """Test that the scaled delay is the same for every attempt."""
    backoff = LinearBackoff(base_delay=100, multiplier=3)
    assert backoff.calculate(1) == 300
    assert backoff.calculate(2) == 300
    assert backoff.calculate(10) == 300


def test_linear_backoff_returns_int() -> None:
    assert isinstance(LinearBackoff(base_delay=7, multiplier=1.1).calculate(1), int)


def test_linear_backoff_negative_multiplier() -> None:
    assert LinearBackoff(base_delay=10, multiplier=-2.0).calculate(1) == -20


def test_linear_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        LinearBackoff(base_delay=-1, multiplier=2.0)


@pytest.mark.parametrize(
    ("base_delay", "multiplier"),
    [(10, float("inf")), (10, float("-inf")), (10, float("nan")), (0, float("inf"))],
)
def test_linear_backoff_non_finite_multiplier_gives_zero(
    base_delay: int, multiplier: float
) -> None:
    assert LinearBackoff(base_delay=base_delay, multiplier=multiplier).calculate(1) == 0
