from __future__ import annotations

from abc import ABC, abstractmethod

from stdnums.core.exceptions import InvalidIdentifier
from stdnums.util.log import LoggerMixin


class Valid(ABC, LoggerMixin):
    """Interface for identifiers that can check their own validity."""

    # The raw identifier string, exactly as it was given.
    identifier: str

    @abstractmethod
    def valid(self) -> bool:
        """Is this identifier structurally and arithmetically correct?"""
        raise NotImplementedError()


class Normalize(Valid):
    """Interface for identifiers that have a canonical string form."""

    @abstractmethod
    def normalize(self) -> str | None:
        """Return the canonical form of this identifier.

        :return: The normalized string, or None if the identifier is not valid.
        """
        raise NotImplementedError()

    def require_normalized(self) -> str:
        """Return the canonical form of this identifier, raising if there is none.

        :raises InvalidIdentifier: If the identifier is not valid.
        """
        normalized = self.normalize()
        if normalized is None:
            raise InvalidIdentifier(type(self).__name__, self.identifier)
        return normalized
