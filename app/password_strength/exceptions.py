"""Password strength exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    PASSWORD_STRENGTH_CONFIG_ERROR = 1


class PasswordStrengthError(Exception):  # noqa N818
    """Base exception class for password strength errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR

    def __init_subclass__(cls) -> None:
        """Initialize subclass."""
        super().__init_subclass__()

        if "code" not in cls.__dict__:
            raise AttributeError("code must be set")


class PasswordStrengthConfigError(PasswordStrengthError):
    """Exception raised when configuration values are invalid."""

    code = ErrorCodes.PASSWORD_STRENGTH_CONFIG_ERROR
