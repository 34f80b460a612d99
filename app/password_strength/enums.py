"""Password strength enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum


class RuleCategory(StrEnum):
    """Whether a strength test may be relaxed."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class MessageKey(StrEnum):
    """Translation keys of the strength tests."""

    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    REPEAT = "repeat"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMBER = "number"
    SPECIAL = "special"
