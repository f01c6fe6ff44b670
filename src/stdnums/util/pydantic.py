from collections.abc import Callable
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator

from stdnums.identifier import ISBN, ISSN, LCCN
from stdnums.identifier.base import Normalize


def normalized_by(identifier_class: type[Normalize]) -> Callable[[str], str]:
    """Build a pydantic validator that replaces a value with its normalized form.

    The validator raises InvalidIdentifier, a ValueError, so pydantic reports
    an invalid value as a regular validation error.
    """

    def validate(value: str) -> str:
        return identifier_class(value).require_normalized()  # type: ignore[call-arg]

    return validate


# Numbers can arrive as JSON integers, so they are converted to strings
# before validation.
ISBN13Str = Annotated[str, AfterValidator(normalized_by(ISBN)), BeforeValidator(str)]
"""An ISBN of either length, stored as its ISBN-13."""

ISSNStr = Annotated[str, AfterValidator(normalized_by(ISSN)), BeforeValidator(str)]
"""An ISSN, stored without its hyphen and with an upper-case check character."""

LCCNStr = Annotated[str, AfterValidator(normalized_by(LCCN)), BeforeValidator(str)]
"""An LCCN, stored in its normalized form."""
