import pickle

import pytest

from stdnums.core.exceptions import (
    BaseStdnumsException,
    InvalidIdentifier,
    StdnumsValueError,
)


@pytest.mark.parametrize("exception_class", [BaseStdnumsException, StdnumsValueError])
def test_pickle(exception_class: type[BaseStdnumsException]):
    exception = exception_class("Something went wrong")
    unpickled = pickle.loads(pickle.dumps(exception))
    assert type(unpickled) is exception_class
    assert unpickled.args == ("Something went wrong",)


def test_value_error():
    with pytest.raises(ValueError):
        raise StdnumsValueError("not a valid ISBN")


class TestInvalidIdentifier:
    def test_message(self):
        exception = InvalidIdentifier("ISSN", "0378-5951")
        assert str(exception) == "0378-5951 is not a valid ISSN."
        assert exception.identifier_type == "ISSN"
        assert exception.identifier == "0378-5951"
        assert isinstance(exception, StdnumsValueError)

    def test_pickle(self):
        exception = InvalidIdentifier("ISBN", "0139381432")
        unpickled = pickle.loads(pickle.dumps(exception))
        assert type(unpickled) is InvalidIdentifier
        assert unpickled.identifier_type == "ISBN"
        assert unpickled.identifier == "0139381432"
        assert str(unpickled) == str(exception)
