"""Password strength data classes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StrengthResult:
    """Outcome of a single password evaluation."""

    strong: bool
    errors: tuple[str, ...]
    passed_tests: tuple[int, ...]
    failed_tests: tuple[int, ...]
    required_test_errors: tuple[str, ...]
    optional_test_errors: tuple[str, ...]
    is_passphrase: bool = False
    optional_tests_passed: int = 0

    def as_dict(self) -> dict[str, Any]:
        """Dump result with camelCase keys."""
        return {
            "strong": self.strong,
            "errors": list(self.errors),
            "passedTests": list(self.passed_tests),
            "failedTests": list(self.failed_tests),
            "requiredTestErrors": list(self.required_test_errors),
            "optionalTestErrors": list(self.optional_test_errors),
            "isPassphrase": self.is_passphrase,
            "optionalTestsPassed": self.optional_tests_passed,
        }
