from typing import Any


class BaseStdnumsException(Exception):
    """Base class for all exceptions raised by stdnums."""


class StdnumsValueError(BaseStdnumsException, ValueError): ...


class InvalidIdentifier(StdnumsValueError):
    """A standard number failed validation where a valid one was required."""

    def __init__(self, identifier_type: str, identifier: str):
        super().__init__(f"{identifier} is not a valid {identifier_type}.")
        self.identifier_type = identifier_type
        self.identifier = identifier

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.identifier_type, self.identifier)
