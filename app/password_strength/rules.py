"""Ordered catalog of password strength tests.

Index of a rule is its position in `RULES` and is reported in
`passed_tests` and `failed_tests` of every result.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, TypeAlias

from . import checks
from .enums import MessageKey, RuleCategory

if TYPE_CHECKING:
    from .settings import PasswordStrengthConfigs

_CheckType: TypeAlias = Callable[[str, "PasswordStrengthConfigs"], bool]


@dataclass(frozen=True)
class StrengthRule:
    """Single strength test."""

    index: int
    category: RuleCategory
    message_key: MessageKey
    check: _CheckType
    message_param: str | None = None

    @property
    def is_required(self) -> bool:
        return self.category is RuleCategory.REQUIRED

    def message_params(self, configs: PasswordStrengthConfigs) -> list[Any]:
        """Get values interpolated into the failure message."""
        if self.message_param is None:
            return []
        return [getattr(configs, self.message_param)]


RULES: tuple[StrengthRule, ...] = (
    StrengthRule(
        index=0,
        category=RuleCategory.REQUIRED,
        message_key=MessageKey.MIN_LENGTH,
        check=checks.min_length,
        message_param="min_length",
    ),
    StrengthRule(
        index=1,
        category=RuleCategory.REQUIRED,
        message_key=MessageKey.MAX_LENGTH,
        check=checks.max_length,
        message_param="max_length",
    ),
    StrengthRule(
        index=2,
        category=RuleCategory.REQUIRED,
        message_key=MessageKey.REPEAT,
        check=checks.no_repeating_characters,
    ),
    StrengthRule(
        index=3,
        category=RuleCategory.OPTIONAL,
        message_key=MessageKey.LOWERCASE,
        check=checks.has_lowercase_letter,
    ),
    StrengthRule(
        index=4,
        category=RuleCategory.OPTIONAL,
        message_key=MessageKey.UPPERCASE,
        check=checks.has_uppercase_letter,
    ),
    StrengthRule(
        index=5,
        category=RuleCategory.OPTIONAL,
        message_key=MessageKey.NUMBER,
        check=checks.has_digit,
    ),
    StrengthRule(
        index=6,
        category=RuleCategory.OPTIONAL,
        message_key=MessageKey.SPECIAL,
        check=checks.has_special_character,
    ),
)

REQUIRED_RULES = tuple(rule for rule in RULES if rule.is_required)
OPTIONAL_RULES = tuple(rule for rule in RULES if not rule.is_required)
