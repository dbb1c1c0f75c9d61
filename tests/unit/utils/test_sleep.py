r"""Unit tests for sleep_microseconds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from aretry.utils.sleep import sleep_microseconds

if TYPE_CHECKING:
    from unittest.mock import Mock


def test_sleep_microseconds_converts_to_seconds(mock_sleep: Mock) -> None:
    sleep_microseconds(250_000)
    mock_sleep.assert_called_once_with(0.25)


def test_sleep_microseconds_one_microsecond(mock_sleep: Mock) -> None:
    sleep_microseconds(1)
    mock_sleep.assert_called_once_with(1e-06)


@pytest.mark.parametrize("delay", [0, -1, -1000])
def test_sleep_microseconds_non_positive_delay(mock_sleep: Mock, delay: int) -> None:
    sleep_microseconds(delay)
    mock_sleep.assert_not_called()
