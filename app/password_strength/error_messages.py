"""Error Messages for password strength tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""


class ErrorMessages:
    """Builtin english messages, `{}` receives the active threshold."""

    MIN_LENGTH = "The password must be at least {} characters long."
    MAX_LENGTH = "The password must be fewer than {} characters."

    REPEAT = "The password may not contain sequences of three or more repeated characters."  # fmt: skip # noqa: E501

    LOWERCASE = "The password must contain at least one lowercase letter."
    UPPERCASE = "The password must contain at least one uppercase letter."
    NUMBER = "The password must contain at least one number."
    SPECIAL = "The password must contain at least one special character."
