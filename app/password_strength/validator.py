"""Password strength validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from threading import Lock
from typing import Any, Mapping

from loguru import logger as loguru_logger
from pydantic import ValidationError

from .dataclasses import StrengthResult
from .exceptions import PasswordStrengthConfigError
from .rules import RULES
from .settings import PasswordStrengthConfigs
from .translations import translate

log = loguru_logger.bind(name="password_strength")


def is_passphrase(password: str, configs: PasswordStrengthConfigs) -> bool:
    """Check if optional tests are waived for `password`."""
    return (
        configs.allow_passphrases
        and len(password) >= configs.min_phrase_length
    )


def evaluate(
    password: str,
    configs: PasswordStrengthConfigs,
) -> StrengthResult:
    """Run every strength rule against the password.

    Required rules always run. Optional rules are counted as passed
    for a passphrase, otherwise at least
    `configs.min_optional_tests_to_pass` of them must pass.

    :param str password: password to evaluate
    :param PasswordStrengthConfigs configs: settings snapshot
    :return StrengthResult: evaluation result
    """
    passphrase = is_passphrase(password, configs)

    passed_tests: list[int] = []
    failed_tests: list[int] = []
    required_test_errors: list[str] = []
    optional_test_errors: list[str] = []
    errors: list[str] = []
    optional_tests_passed = 0

    for rule in RULES:
        if not rule.is_required and passphrase:
            passed_tests.append(rule.index)
            optional_tests_passed += 1
            continue

        if rule.check(password, configs):
            passed_tests.append(rule.index)
            if not rule.is_required:
                optional_tests_passed += 1
            continue

        message = translate(
            rule.message_key,
            configs.translate,
            *rule.message_params(configs),
        )
        failed_tests.append(rule.index)
        errors.append(message)
        if rule.is_required:
            required_test_errors.append(message)
        else:
            optional_test_errors.append(message)

    strong = not required_test_errors and (
        passphrase
        or optional_tests_passed >= configs.min_optional_tests_to_pass
    )

    return StrengthResult(
        strong=strong,
        errors=tuple(errors),
        passed_tests=tuple(passed_tests),
        failed_tests=tuple(failed_tests),
        required_test_errors=tuple(required_test_errors),
        optional_test_errors=tuple(optional_test_errors),
        is_passphrase=passphrase,
        optional_tests_passed=optional_tests_passed,
    )


class PasswordStrengthTester:
    """Password strength tester with its own settings.

    :Example:
        .. code-block:: python

            tester = PasswordStrengthTester()
            tester.config({"minLength": 12})
            assert tester.test("L0veSexSecre+God").strong
            assert not tester.test("L0veSex+God").strong
    """

    _configs: PasswordStrengthConfigs
    _lock: Lock

    def __init__(self) -> None:
        """Create tester with default settings."""
        self._configs = PasswordStrengthConfigs()
        self._lock = Lock()

    @property
    def configs(self) -> PasswordStrengthConfigs:
        """Read-only snapshot of current settings."""
        return self._configs.snapshot()

    def config(
        self,
        partial: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> PasswordStrengthConfigs:
        """Merge settings into the current ones.

        Recognized keys are `allowPassphrases`, `minLength`, `maxLength`,
        `minPhraseLength`, `minOptionalTestsToPass`, `translate` and their
        snake_case spellings. Other keys are ignored.

        :param Mapping[str, Any] | None partial: settings to merge
        :raises PasswordStrengthConfigError: value of a known key is
            invalid, current settings stay untouched
        :return PasswordStrengthConfigs: snapshot of merged settings
        """
        updates = {**(partial or {}), **kwargs}

        with self._lock:
            try:
                self._configs = self._configs.merge(updates)
            except ValidationError as err:
                raise PasswordStrengthConfigError(str(err)) from err

            return self._configs.snapshot()

    def test(self, password: Any = None) -> StrengthResult:
        """Evaluate password against current settings.

        Missing or non-string password is evaluated as an empty string.
        """
        if password is None:
            password = ""
        elif not isinstance(password, str):
            log.debug(
                f"Got password of type `{type(password).__name__}`, "
                "evaluating empty string",
            )
            password = ""

        return evaluate(password, self._configs)


def create() -> PasswordStrengthTester:
    """Get new tester, independent of any other one."""
    return PasswordStrengthTester()
