"""LCCN normalization and validation.

Follows the Library of Congress syntax rules at
https://www.loc.gov/marc/lccn-namespace.html#syntax
"""

from __future__ import annotations

from dataclasses import dataclass

from stdnums.identifier.base import Normalize

LCCN_URI_PREFIX = "http://lccn.loc.gov/"

# Width of the serial number segment that follows the year.
SERIAL_WIDTH = 6

# The rightmost eight characters of an LCCN are always digits.
NUMERIC_SUFFIX_LENGTH = 8


def _all_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _all_alpha(value: str) -> bool:
    return value.isascii() and value.isalpha()


def reduce_to_basic(lccn: str) -> str:
    """Remove whitespace, the lccn.loc.gov URI prefix and any "/" suffix."""
    without_whitespace = "".join(lccn.split())
    without_prefix = without_whitespace.replace(LCCN_URI_PREFIX, "")
    return without_prefix.partition("/")[0]


def normalized_version(lccn: str, preprocessed: bool = False) -> str:
    """Expand a hyphenated LCCN so the serial number is six digits wide.

    "85-2" becomes "85000002". Anything after a second hyphen is dropped.

    :param preprocessed: The caller has already reduced the LCCN to its basic
        form, so whitespace, URI prefix and suffix are left alone.
    """
    basic = lccn if preprocessed else reduce_to_basic(lccn)
    if "-" not in basic:
        return basic
    segments = basic.split("-")
    prefix, serial = segments[0], segments[1]
    return prefix + serial.rjust(SERIAL_WIDTH, "0")


def _structurally_valid(normalized: str) -> bool:
    clean = normalized.replace("-", "")
    if not _all_digits(clean[-NUMERIC_SUFFIX_LENGTH:]):
        return False

    length = len(clean)
    if length == 8:
        return True
    if length == 9:
        # One letter prefix, two digit year.
        return _all_alpha(clean[0])
    if length == 10:
        # Two letter prefix and two digit year, or no prefix and four digit year.
        return _all_digits(clean[:2]) or _all_alpha(clean[:2])
    if length == 11:
        # Three letter prefix and two digit year, or one letter and four digit year.
        return _all_alpha(clean[0]) and (
            _all_digits(clean[1:3]) or _all_alpha(clean[1:3])
        )
    if length == 12:
        # Two letter prefix and four digit year.
        return _all_alpha(clean[:2]) and _all_digits(clean[2:4])
    return False


def valid(lccn: str, preprocessed: bool = False) -> bool:
    """Check an LCCN against the Library of Congress structural rules.

    :param lccn: An LCCN, which may carry whitespace, the lccn.loc.gov URI
        prefix and "/" delimited suffixes such as revision codes.
    :param preprocessed: The caller has already reduced the LCCN to its basic form.
    """
    return _structurally_valid(normalized_version(lccn, preprocessed))


def normalize(lccn: str) -> str | None:
    """Normalize an LCCN, or return None if it is not valid.

    The result has no whitespace, prefix, suffix or hyphen, so normalizing
    it again returns the same string.
    """
    normalized = normalized_version(lccn)
    if not _structurally_valid(normalized):
        return None
    return normalized


@dataclass(frozen=True)
class LCCN(Normalize):
    """A Library of Congress Control Number."""

    identifier: str

    def normalized_version(self) -> str:
        return normalized_version(self.identifier)

    def valid(self) -> bool:
        return valid(self.identifier)

    def normalize(self) -> str | None:
        result = normalize(self.identifier)
        if result is None:
            self.log.debug(f'"{self.identifier}" is not a valid LCCN')
        return result
