"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

import pytest

import password_strength
from password_strength import PasswordStrengthTester


@pytest.fixture
def tester() -> PasswordStrengthTester:
    """Get tester with default settings."""
    return password_strength.create()


@pytest.fixture
def default_tester(
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[PasswordStrengthTester]:
    """Replace shared tester so module level settings do not leak."""
    fresh = password_strength.create()
    monkeypatch.setattr(password_strength, "default_tester", fresh)
    yield fresh
