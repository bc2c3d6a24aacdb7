"""
Character-class fingerprinting ("affinity mask") of passwords.
"""

from typing import Callable, List, Tuple

MASK_LENGTH = 28

# Codes
ABSENT = 0
COMMON_LOWER = 1
OTHER_LOWER = 2
COMMON_UPPER = 3
OTHER_UPPER = 4
DIGIT = 5
COMMON_SYMBOL = 6
OTHER = 7

COMMON_LOWER_CHARS = frozenset("esaitnruol")
COMMON_UPPER_CHARS = frozenset("ESAITNRUOL")
COMMON_SYMBOL_CHARS = frozenset("><-?./!%@&")

# First match wins. The explicit sets must be checked before the general
# category tests so the codes line up with the reference data.
RULES: List[Tuple[Callable[[str], bool], int]] = [
    (COMMON_LOWER_CHARS.__contains__, COMMON_LOWER),
    (COMMON_UPPER_CHARS.__contains__, COMMON_UPPER),
    (COMMON_SYMBOL_CHARS.__contains__, COMMON_SYMBOL),
    (str.islower, OTHER_LOWER),
    (str.isupper, OTHER_UPPER),
    (str.isdecimal, DIGIT),
]


class Fingerprinter:
    """Map passwords to fixed-length tuples of character-class codes."""

    @staticmethod
    def classify(char: str) -> int:
        """Return the category code of a single character."""
        for matches, code in RULES:
            if matches(char):
                return code
        return OTHER

    @staticmethod
    def fingerprint(password: str) -> Tuple[int, ...]:
        """Build the affinity mask of a password.

        Slots past the end of the password stay ABSENT and characters
        after position MASK_LENGTH - 1 are ignored.
        """
        mask = [ABSENT] * MASK_LENGTH
        for i, char in enumerate(password[:MASK_LENGTH]):
            mask[i] = Fingerprinter.classify(char)
        return tuple(mask)


classify = Fingerprinter.classify
fingerprint = Fingerprinter.fingerprint
