"""ISBN (ISO 2108) check digits, validation and ISBN-10/ISBN-13 conversion."""

from __future__ import annotations

from dataclasses import dataclass
from string import digits

import isbnlib

from stdnums.identifier.base import Normalize

ISBN_10_LENGTH = 10
ISBN_13_LENGTH = 13

# GS1 prefix used when promoting an ISBN-10 to an ISBN-13.
BOOKLAND_PREFIX = "978"

# ISBN-13s in this GS1 prefix have no ISBN-10 equivalent.
NO_ISBN_10_PREFIX = "979"


def checkdigit(isbn: str) -> str | None:
    """Calculate the check digit for an ISBN.

    :param isbn: An ISBN-10 or ISBN-13, with or without hyphens or a
        leading label such as "ISBN:".
    :return: The expected check character, or None if the ISBN is not
        10 or 13 characters long once reduced to its basic form, or has an
        "X" before its last character.
    """
    basic = reduce_to_basic(isbn)
    if len(basic) == ISBN_10_LENGTH:
        return checkdigit_ten(basic) or None
    if len(basic) == ISBN_13_LENGTH:
        return checkdigit_thirteen(basic) or None
    return None


def valid(isbn: str) -> bool:
    """Check that an ISBN has a correct length and check digit."""
    basic = reduce_to_basic(isbn)
    if len(basic) == ISBN_10_LENGTH:
        return checkdigit_ten(basic) == basic[-1]
    if len(basic) == ISBN_13_LENGTH:
        return checkdigit_thirteen(basic) == basic[-1]
    return False


def convert_to_13(isbn: str) -> str | None:
    """Convert an ISBN to its ISBN-13 form.

    An ISBN-10 gains the 978 prefix and a recomputed check digit. An ISBN-13
    is returned in its basic form.

    :return: The ISBN-13, or None if the ISBN is not valid.
    """
    if not valid(isbn):
        return None
    basic = reduce_to_basic(isbn)
    if len(basic) == ISBN_13_LENGTH:
        return basic
    prefixed = BOOKLAND_PREFIX + basic[:9]
    return prefixed + checkdigit_thirteen(prefixed)


def convert_to_10(isbn: str) -> str | None:
    """Convert an ISBN to its ISBN-10 form.

    :return: The ISBN-10, or None if the ISBN is not valid or is an ISBN-13
        in the 979 prefix, which has no ISBN-10 equivalent.
    """
    if not valid(isbn):
        return None
    basic = reduce_to_basic(isbn)
    if basic.startswith(NO_ISBN_10_PREFIX):
        return None
    if len(basic) == ISBN_10_LENGTH:
        return basic
    body = basic[3:12]
    return body + checkdigit_ten(body)


def normalize(isbn: str) -> str | None:
    """Normalize an ISBN to its ISBN-13 form, or None if it is not valid."""
    return convert_to_13(isbn)


def reduce_to_basic(isbn: str) -> str:
    """Strip hyphens and any leading label from an ISBN.

    Everything before the first digit is dropped, then digits and "X" are
    collected up to the first character that is neither.
    """
    return scrub_alpha_prefix(isbn.replace("-", ""))


def scrub_alpha_prefix(value: str) -> str:
    start = 0
    while start < len(value) and value[start] not in digits:
        start += 1
    end = start
    while end < len(value) and (value[end] in digits or value[end] == "X"):
        end += 1
    return value[start:end]


def checkdigit_ten(basic: str) -> str:
    """ISBN-10 check character for the first nine characters of a basic form.

    Empty if those nine characters are not all digits.
    """
    return isbnlib.check_digit10(basic[:9])


def checkdigit_thirteen(basic: str) -> str:
    """ISBN-13 check digit for the first twelve characters of a basic form.

    Empty if those twelve characters are not all digits.
    """
    return isbnlib.check_digit13(basic[:12])


@dataclass(frozen=True)
class ISBN(Normalize):
    """An International Standard Book Number, 10 or 13 digits long."""

    identifier: str

    def checkdigit(self) -> str | None:
        return checkdigit(self.identifier)

    def valid(self) -> bool:
        return valid(self.identifier)

    def convert_to_13(self) -> str | None:
        return convert_to_13(self.identifier)

    def convert_to_10(self) -> str | None:
        result = convert_to_10(self.identifier)
        if result is None:
            self.log.debug(f'"{self.identifier}" has no ISBN-10 form')
        return result

    def normalize(self) -> str | None:
        result = normalize(self.identifier)
        if result is None:
            self.log.debug(f'"{self.identifier}" is not a valid ISBN')
        return result
