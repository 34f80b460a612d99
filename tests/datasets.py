"""Datasets for testing password strength.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

# https://owasp.org/www-community/password-special-characters
OWASP_SPECIALS = list(" !\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

STRONG_PASSWORD = "L0veSexSecre+God"
PASSPHRASE = "Hack the planet! Hack the planet!"

norwegian_translations = {
    "minLength": lambda min_length: f"Passordet må minst vœre {min_length} tegn.",  # noqa: E501
    "maxLength": lambda max_length: f"Passordet kan maks vœre {max_length} tegn.",  # noqa: E501
    "repeat": "Passordet kan ikke innholde tre eller mer like tegn etter hverandre.",  # noqa: E501
    "lowercase": "Passordet må inneholde minst en liten bokstav.",
    "uppercase": "Passordet må inneholde minst en stor bokstav.",
    "number": "Passordet må minst inneholde et nummer.",
    "special": "Passordet må minst inneholde et spesialtegn",
}

test_single_failure_data = [
    ("L0^eSex", 0, "required"),
    ("abc" * 50, 1, "required"),
    ("L0veSexxxSecre+God", 2, "required"),
    ("L0VESEXSECRE+GOD", 3, "optional"),
    ("l0vesexsecre+god", 4, "optional"),
    ("LoveSexSecre+God", 5, "optional"),
    ("L0veSexSecretGod", 6, "optional"),
]
