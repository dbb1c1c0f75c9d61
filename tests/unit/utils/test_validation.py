r"""Unit tests for retry configuration validators."""

from __future__ import annotations

import pytest

from aretry.exceptions import (
    InvalidDelayError,
    InvalidRetryTimesError,
    MutuallyExclusiveBackoffPolicyError,
)
from aretry.utils.validation import (
    validate_base_delay,
    validate_exponential_backoff,
    validate_linear_backoff_multiplier,
    validate_max_attempts,
)

###########################################
#     Tests for validate_max_attempts     #
###########################################


@pytest.mark.parametrize("max_attempts", [1, 3, 100])
def test_validate_max_attempts_valid(max_attempts: int) -> None:
    validate_max_attempts(max_attempts)


@pytest.mark.parametrize("max_attempts", [0, -1, -5])
def test_validate_max_attempts_invalid(max_attempts: int) -> None:
    with pytest.raises(InvalidRetryTimesError, match=rf"Tried to set {max_attempts} retry times"):
        validate_max_attempts(max_attempts)


#########################################
#     Tests for validate_base_delay     #
#########################################


@pytest.mark.parametrize("base_delay", [0, 1, 1_000_000])
def test_validate_base_delay_valid(base_delay: int) -> None:
    validate_base_delay(base_delay)


@pytest.mark.parametrize("base_delay", [-1, -3])
def test_validate_base_delay_invalid(base_delay: int) -> None:
    with pytest.raises(InvalidDelayError, match=rf"Tried to set {base_delay} as delay"):
        validate_base_delay(base_delay)


###########################################
#     Tests for backoff mutual exclusion  #
###########################################


def test_validate_exponential_backoff_with_default_multiplier() -> None:
    validate_exponential_backoff(True, 1.0)


def test_validate_exponential_backoff_disabled_with_linear() -> None:
    validate_exponential_backoff(False, 2.0)


def test_validate_exponential_backoff_with_linear() -> None:
    with pytest.raises(
        MutuallyExclusiveBackoffPolicyError,
        match=r"Tried to use exponential backoff policy with linear multiplier != 1",
    ):
        validate_exponential_backoff(True, 2.0)


def test_validate_linear_backoff_multiplier_without_exponential() -> None:
    validate_linear_backoff_multiplier(3.0, False)


def test_validate_linear_backoff_multiplier_reset_with_exponential() -> None:
    validate_linear_backoff_multiplier(1.0, True)


def test_validate_linear_backoff_multiplier_with_exponential() -> None:
    with pytest.raises(
        MutuallyExclusiveBackoffPolicyError,
        match=r"Tried to use linear backoff with exponential enabled",
    ):
        validate_linear_backoff_multiplier(2.0, True)


@pytest.mark.parametrize("max_attempts", [2.5, "3", None])
def test_validate_max_attempts_not_int(max_attempts: object) -> None:
    with pytest.raises(InvalidRetryTimesError, match=rf"Tried to set {max_attempts} retry times"):
        validate_max_attempts(max_attempts)


@pytest.mark.parametrize("base_delay", [1.5, 0.0, "10", None])
def test_validate_base_delay_not_int(base_delay: object) -> None:
    with pytest.raises(InvalidDelayError, match=rf"Tried to set {base_delay} as delay"):
        validate_base_delay(base_delay)
