from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str | None = version("library-stdnums")
except PackageNotFoundError:
    __version__ = None

from stdnums.identifier import ISBN, ISSN, LCCN, Normalize, Valid
from stdnums.identifier.parser import type_and_identifier_for_urn

__all__ = [
    "ISBN",
    "ISSN",
    "LCCN",
    "Normalize",
    "Valid",
    "__version__",
    "type_and_identifier_for_urn",
]
