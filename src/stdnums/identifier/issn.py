"""ISSN (ISO 3297) check digits, validation and normalization."""

from __future__ import annotations

from dataclasses import dataclass
from string import digits

from stdnums.identifier.base import Normalize


def checkdigit(issn: str) -> str:
    """Calculate the check digit for an ISSN.

    This never fails: the weighted sum is taken over whatever digits are
    among the first seven characters, so the result is meaningless for
    malformed input. Use valid() to check an ISSN.
    """
    first_seven = issn.replace("-", "")[:7]
    values = [int(c) for c in first_seven if c in digits]
    total = sum(digit * (8 - index) for index, digit in enumerate(values))
    value = (11 - total % 11) % 11
    return "X" if value == 10 else str(value)


def reduce_to_basics(issn: str) -> str | None:
    """Strip hyphens and upper-case the check character.

    :return: The reduced ISSN, or None if anything other than the last
        character is not a digit, or the last character is neither a digit
        nor "X".
    """
    clean = issn.replace("-", "").replace("x", "X")
    last = len(clean) - 1
    if all(
        c in digits or (c == "X" and index == last)
        for index, c in enumerate(clean)
    ):
        return clean
    return None


def valid(issn: str) -> bool:
    basic = reduce_to_basics(issn)
    if not basic:
        return False
    return checkdigit(issn) == basic[-1]


def normalize(issn: str) -> str | None:
    """Normalize an ISSN to eight characters with no hyphen and an upper-case "X"."""
    basic = reduce_to_basics(issn)
    if basic is None or not valid(basic):
        return None
    return basic


@dataclass(frozen=True)
class ISSN(Normalize):
    """An International Standard Serial Number."""

    identifier: str

    def checkdigit(self) -> str:
        return checkdigit(self.identifier)

    def valid(self) -> bool:
        return valid(self.identifier)

    def normalize(self) -> str | None:
        result = normalize(self.identifier)
        if result is None:
            self.log.debug(f'"{self.identifier}" is not a valid ISSN')
        return result
