"""Password strength constants file."""

import string
from typing import Literal

DEFAULT_MIN_LENGTH: Literal[10] = 10
DEFAULT_MAX_LENGTH: Literal[128] = 128
DEFAULT_MIN_PHRASE_LENGTH: Literal[20] = 20
DEFAULT_ALLOW_PASSPHRASES: Literal[True] = True

# https://owasp.org/www-community/password-special-characters
OWASP_SPECIAL_CHARACTERS: str = " " + string.punctuation

REGEXP_REPEATING_CHARACTERS: str = r"(.)\1{2,}"
REGEXP_LOWERCASE_LETTERS: str = r"[a-z]"
REGEXP_UPPERCASE_LETTERS: str = r"[A-Z]"
REGEXP_DIGITS: str = r"[0-9]"
