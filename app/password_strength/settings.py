"""Password strength settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, Mapping

from loguru import logger as loguru_logger
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .constants import (
    DEFAULT_ALLOW_PASSPHRASES,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_MIN_PHRASE_LENGTH,
)
from .rules import OPTIONAL_RULES
from .translations import TranslationValue, to_translation_value

log = loguru_logger.bind(name="password_strength")


class PasswordStrengthConfigs(BaseModel):
    """Live settings of a password strength tester.

    Fields are readable in snake_case, camelCase names are accepted
    as aliases on merge.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    allow_passphrases: bool = Field(DEFAULT_ALLOW_PASSPHRASES, strict=True)
    max_length: int = Field(DEFAULT_MAX_LENGTH, ge=0, strict=True)
    min_length: int = Field(DEFAULT_MIN_LENGTH, ge=0, strict=True)
    min_phrase_length: int = Field(
        DEFAULT_MIN_PHRASE_LENGTH,
        ge=0,
        strict=True,
    )
    min_optional_tests_to_pass: int = Field(
        len(OPTIONAL_RULES),
        ge=0,
        strict=True,
    )
    translate: dict[str, TranslationValue] = Field(default_factory=dict)

    @field_validator("translate", mode="before")
    @classmethod
    def _tag_translations(cls, value: Any) -> dict[str, TranslationValue]:
        if not isinstance(value, Mapping):
            raise ValueError("translate must be a mapping")

        try:
            return {
                str(key): to_translation_value(item)
                for key, item in value.items()
            }
        except TypeError as err:
            raise ValueError(str(err)) from err

    @classmethod
    def known_keys(cls) -> dict[str, str]:
        """Map every accepted key spelling to its field name."""
        keys: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            keys[name] = name
            if field.alias:
                keys[field.alias] = name
        return keys

    def merge(self, partial: Mapping[str, Any]) -> "PasswordStrengthConfigs":
        """Build new settings with recognized keys of `partial` applied.

        Unknown keys are dropped, `translate` is merged key by key onto
        current overrides.

        :param Mapping[str, Any] partial: caller settings
        :raises pydantic.ValidationError: value of a known key is invalid
        :return PasswordStrengthConfigs: merged settings
        """
        known = self.known_keys()
        updates: dict[str, Any] = {}

        for key, value in partial.items():
            name = known.get(key)
            if name is None:
                log.debug(f"Ignoring unknown password strength key `{key}`")
                continue
            updates[name] = value

        if "translate" in updates:
            translate = updates["translate"]
            if isinstance(translate, Mapping):
                updates["translate"] = {**self.translate, **translate}

        if updates:
            log.debug(
                "Applying password strength keys: "
                + ", ".join(sorted(updates)),
            )

        current = self.model_dump(exclude={"translate"})
        current["translate"] = self.translate
        return type(self).model_validate(current | updates)

    def snapshot(self) -> "PasswordStrengthConfigs":
        """Copy settings, overrides mapping included."""
        return self.model_copy(update={"translate": dict(self.translate)})
