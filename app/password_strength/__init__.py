"""OWASP password strength test.

Module functions use the shared `default_tester`; call `create` to get
a tester with separate settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, Mapping

from .dataclasses import StrengthResult
from .enums import MessageKey, RuleCategory
from .exceptions import PasswordStrengthConfigError, PasswordStrengthError
from .rules import OPTIONAL_RULES, REQUIRED_RULES, RULES, StrengthRule
from .settings import PasswordStrengthConfigs
from .translations import MessageFactory, StaticMessage
from .validator import PasswordStrengthTester, create, evaluate

default_tester = create()


def test(password: Any = None) -> StrengthResult:
    """Evaluate password with the default tester."""
    return default_tester.test(password)


def config(
    partial: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> PasswordStrengthConfigs:
    """Merge settings into the default tester."""
    return default_tester.config(partial, **kwargs)


def __getattr__(name: str) -> Any:
    if name == "configs":
        return default_tester.configs
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MessageFactory",
    "MessageKey",
    "OPTIONAL_RULES",
    "PasswordStrengthConfigError",
    "PasswordStrengthConfigs",
    "PasswordStrengthError",
    "PasswordStrengthTester",
    "REQUIRED_RULES",
    "RULES",
    "RuleCategory",
    "StaticMessage",
    "StrengthResult",
    "StrengthRule",
    "config",
    "create",
    "default_tester",
    "evaluate",
    "test",
]
