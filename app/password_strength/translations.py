"""Translation values and message rendering.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeAlias

from .enums import MessageKey
from .error_messages import ErrorMessages


@dataclass(frozen=True)
class StaticMessage:
    """Message used verbatim, whatever the threshold."""

    text: str

    def render(self, *_: Any) -> str:
        """Return message text."""
        return self.text


@dataclass(frozen=True)
class MessageFactory:
    """Message built from the active threshold of a test."""

    factory: Callable[..., str]

    def render(self, *params: Any) -> str:
        """Call factory with test params fitted to its signature."""
        return str(self.factory(*fit_params(self.factory, params)))


def fit_params(
    factory: Callable[..., str],
    params: tuple[Any, ...],
) -> tuple[Any, ...]:
    """Drop extra or pad missing positional params with `None`.

    :raises TypeError: factory requires keyword-only arguments
    """
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        return params

    kinds = [param.kind for param in signature.parameters.values()]
    if inspect.Parameter.VAR_POSITIONAL in kinds:
        return params

    positional = [
        param
        for param in signature.parameters.values()
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        )
    ]
    required = sum(param.default is param.empty for param in positional)

    args = params[: len(positional)]
    args += (None,) * (required - len(args))
    signature.bind(*args)
    return args


TranslationValue: TypeAlias = StaticMessage | MessageFactory


def to_translation_value(value: Any) -> TranslationValue:
    """Select translation variant for a raw configuration value.

    :param Any value: string, callable or an already built variant
    :raises TypeError: value has none of the supported types or is a
        callable requiring keyword-only arguments
    :return TranslationValue: tagged translation value
    """
    if isinstance(value, (StaticMessage, MessageFactory)):
        return value
    if isinstance(value, str):
        return StaticMessage(value)
    if callable(value):
        fit_params(value, ())
        return MessageFactory(value)
    raise TypeError(
        "Translation must be a string or a callable, "
        f"got `{type(value).__name__}`",
    )


DEFAULT_TRANSLATIONS: dict[MessageKey, TranslationValue] = {
    MessageKey.MIN_LENGTH: MessageFactory(ErrorMessages.MIN_LENGTH.format),
    MessageKey.MAX_LENGTH: MessageFactory(ErrorMessages.MAX_LENGTH.format),
    MessageKey.REPEAT: StaticMessage(ErrorMessages.REPEAT),
    MessageKey.LOWERCASE: StaticMessage(ErrorMessages.LOWERCASE),
    MessageKey.UPPERCASE: StaticMessage(ErrorMessages.UPPERCASE),
    MessageKey.NUMBER: StaticMessage(ErrorMessages.NUMBER),
    MessageKey.SPECIAL: StaticMessage(ErrorMessages.SPECIAL),
}


def translate(
    key: MessageKey,
    overrides: Mapping[str, TranslationValue],
    *params: Any,
) -> str:
    """Render message for a failed test.

    Configured override wins, builtin english text is the fallback.
    """
    value = overrides.get(key) or DEFAULT_TRANSLATIONS[key]
    return value.render(*params)
