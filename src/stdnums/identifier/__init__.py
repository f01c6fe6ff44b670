from stdnums.identifier.base import Normalize, Valid
from stdnums.identifier.isbn import ISBN
from stdnums.identifier.issn import ISSN
from stdnums.identifier.lccn import LCCN

__all__ = ["ISBN", "ISSN", "LCCN", "Normalize", "Valid"]
