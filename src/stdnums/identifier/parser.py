from __future__ import annotations

from abc import ABC, abstractmethod
from urllib.parse import unquote

from stdnums.core.exceptions import StdnumsValueError
from stdnums.identifier.base import Normalize
from stdnums.identifier.isbn import ISBN
from stdnums.identifier.issn import ISSN
from stdnums.identifier.lccn import LCCN
from stdnums.util.log import LoggerMixin


class IdentifierTypes:
    ISBN = "ISBN"
    ISSN = "ISSN"
    LCCN = "LCCN"


class IdentifierParser(ABC, LoggerMixin):
    """Interface for identifier parsers."""

    @abstractmethod
    def parse(self, identifier_string: str) -> tuple[str, str] | None:
        """Parse a string containing an identifier, extract it and determine its type.

        :param identifier_string: String containing an identifier
        :return: 2-tuple containing the identifier's type and its normalized form,
            or None if the string is not in a scheme this parser understands

        :raises InvalidIdentifier: If the string is in this parser's scheme
            but the identifier in it is not valid
        """
        raise NotImplementedError()


class SchemePrefixIdentifierParser(IdentifierParser):
    """Parser for identifiers written as a scheme prefix followed by the identifier."""

    IDENTIFIER_TYPE: str
    PREFIXES: tuple[str, ...]

    @abstractmethod
    def identifier(self, value: str) -> Normalize: ...

    def parse(self, identifier_string: str) -> tuple[str, str] | None:
        self.log.debug(f'Started parsing identifier string "{identifier_string}"')

        lowered = identifier_string.lower()
        for prefix in self.PREFIXES:
            if lowered.startswith(prefix):
                value = unquote(identifier_string[len(prefix) :])
                normalized = self.identifier(value).require_normalized()
                result = (self.IDENTIFIER_TYPE, normalized)
                self.log.debug(
                    f'Finished parsing identifier string "{identifier_string}". Result: {result}'
                )
                return result

        self.log.debug(
            f'Finished parsing identifier string "{identifier_string}". It does not contain a '
            f"{self.IDENTIFIER_TYPE}"
        )
        return None


class ISBNURNIdentifierParser(SchemePrefixIdentifierParser):
    """Parser for ISBN URNs. The result is always an ISBN-13."""

    IDENTIFIER_TYPE = IdentifierTypes.ISBN
    PREFIXES = ("urn:isbn:",)

    def identifier(self, value: str) -> Normalize:
        return ISBN(value)


class ISSNURNIdentifierParser(SchemePrefixIdentifierParser):
    """Parser for ISSN URNs."""

    IDENTIFIER_TYPE = IdentifierTypes.ISSN
    PREFIXES = ("urn:issn:",)

    def identifier(self, value: str) -> Normalize:
        return ISSN(value)


class LCCNURIIdentifierParser(SchemePrefixIdentifierParser):
    """Parser for LCCN info URIs and lccn.loc.gov permalinks."""

    IDENTIFIER_TYPE = IdentifierTypes.LCCN
    PREFIXES = (
        "info:lccn/",
        "http://lccn.loc.gov/",
        "https://lccn.loc.gov/",
    )

    def identifier(self, value: str) -> Normalize:
        return LCCN(value)


PARSERS: list[IdentifierParser] = [
    ISBNURNIdentifierParser(),
    ISSNURNIdentifierParser(),
    LCCNURIIdentifierParser(),
]


def type_and_identifier_for_urn(identifier_string: str) -> tuple[str, str]:
    """Determine the type of a URN or URI and normalize the identifier in it.

    :raises StdnumsValueError: If no parser recognizes the string, or the
        identifier in it is not valid.
    """
    for parser in PARSERS:
        result = parser.parse(identifier_string)
        if result:
            return result

    raise StdnumsValueError(
        f"Could not turn {identifier_string} into a recognized identifier."
    )
