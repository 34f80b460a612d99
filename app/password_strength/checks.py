"""Password strength checks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .constants import (
    OWASP_SPECIAL_CHARACTERS,
    REGEXP_DIGITS,
    REGEXP_LOWERCASE_LETTERS,
    REGEXP_REPEATING_CHARACTERS,
    REGEXP_UPPERCASE_LETTERS,
)

if TYPE_CHECKING:
    from .settings import PasswordStrengthConfigs

_SPECIAL_CHARACTERS = frozenset(OWASP_SPECIAL_CHARACTERS)


def min_length(password: str, configs: PasswordStrengthConfigs) -> bool:
    """Validate minimum password length."""
    return len(password) >= configs.min_length


def max_length(password: str, configs: PasswordStrengthConfigs) -> bool:
    """Validate maximum password length."""
    return len(password) <= configs.max_length


def no_repeating_characters(
    password: str,
    _: PasswordStrengthConfigs,
) -> bool:
    """Forbid a character repeated three or more times in a row."""
    return re.search(REGEXP_REPEATING_CHARACTERS, password) is None


def has_lowercase_letter(password: str, _: PasswordStrengthConfigs) -> bool:
    return re.search(REGEXP_LOWERCASE_LETTERS, password) is not None


def has_uppercase_letter(password: str, _: PasswordStrengthConfigs) -> bool:
    return re.search(REGEXP_UPPERCASE_LETTERS, password) is not None


def has_digit(password: str, _: PasswordStrengthConfigs) -> bool:
    return re.search(REGEXP_DIGITS, password) is not None


def has_special_character(
    password: str,
    _: PasswordStrengthConfigs,
) -> bool:
    """Require at least one OWASP special character, space included."""
    return not _SPECIAL_CHARACTERS.isdisjoint(password)
