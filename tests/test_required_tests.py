"""Test required password strength tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from password_strength import PasswordStrengthTester
from tests.datasets import STRONG_PASSWORD


def test_missing_password(tester: PasswordStrengthTester) -> None:
    """Test password is not required to be passed."""
    result = tester.test()
    assert result.strong is False
    assert 0 in result.failed_tests
    assert result.errors[0] == result.required_test_errors[0]


@pytest.mark.parametrize("password", ["", 12345, b"L0veSexSecre+God"])
def test_non_string_password_is_empty(
    tester: PasswordStrengthTester,
    password: object,
) -> None:
    """Test non string password is evaluated as empty one."""
    assert tester.test(password) == tester.test("")


def test_min_length(tester: PasswordStrengthTester) -> None:
    """Test minimum length is enforced."""
    result = tester.test("L0^eSex")
    assert result.strong is False
    assert len(result.errors) == 1
    assert len(result.required_test_errors) == 1
    assert result.failed_tests == (0,)
    assert result.errors == (
        "The password must be at least 10 characters long.",
    )


def test_max_length(tester: PasswordStrengthTester) -> None:
    """Test maximum length is enforced."""
    result = tester.test("abc" * 50)
    assert result.strong is False
    assert len(result.errors) == 1
    assert len(result.required_test_errors) == 1
    assert result.failed_tests == (1,)
    assert result.errors == (
        "The password must be fewer than 128 characters.",
    )


def test_repeating_characters(tester: PasswordStrengthTester) -> None:
    """Test characters repeated 3 times or more are forbidden."""
    result = tester.test("L0veSexxxSecre+God")
    assert result.strong is False
    assert len(result.errors) == 1
    assert len(result.required_test_errors) == 1
    assert result.failed_tests == (2,)


def test_double_characters_allowed(tester: PasswordStrengthTester) -> None:
    """Test character repeated twice is fine."""
    assert tester.test("L0veSexxSecre+God").strong


def test_required_failure_beats_passphrase(
    tester: PasswordStrengthTester,
) -> None:
    """Test passphrase is still subject to required tests."""
    result = tester.test("Hack the planet!!! Hack the planet")
    assert result.is_passphrase
    assert result.strong is False
    assert result.failed_tests == (2,)


def test_length_bounds_are_inclusive(tester: PasswordStrengthTester) -> None:
    """Test password of exact bound length passes length tests."""
    length = len(STRONG_PASSWORD)
    tester.config(minLength=length, maxLength=length)
    result = tester.test(STRONG_PASSWORD)
    assert result.strong
    assert result.passed_tests == (0, 1, 2, 3, 4, 5, 6)
