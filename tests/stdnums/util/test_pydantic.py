import pytest
from pydantic import BaseModel, ValidationError

from stdnums.identifier import ISBN
from stdnums.util.pydantic import ISBN13Str, ISSNStr, LCCNStr, normalized_by


VALID = {"isbn": "0-306-40615-2", "issn": "1043-383x", "lccn": "gm 71-2450"}


class Record(BaseModel):
    isbn: ISBN13Str
    issn: ISSNStr
    lccn: LCCNStr


class TestIdentifierTypes:
    def test_normalizes(self):
        record = Record(**VALID)
        assert record.isbn == "9780306406157"
        assert record.issn == "1043383X"
        assert record.lccn == "gm71002450"

    def test_json(self):
        record = Record.model_validate_json(
            '{"isbn": 9780306406157, "issn": "0378-5955", "lccn": "http://lccn.loc.gov/89001234"}'
        )
        assert record.isbn == "9780306406157"
        assert record.issn == "03785955"
        assert record.lccn == "89001234"
        assert record.model_dump() == {
            "isbn": "9780306406157",
            "issn": "03785955",
            "lccn": "89001234",
        }

    @pytest.mark.parametrize(
        "field, value, message",
        [
            pytest.param("isbn", "0139381432", "0139381432 is not a valid ISBN.", id="isbn"),
            pytest.param("issn", "0378-5951", "0378-5951 is not a valid ISSN.", id="issn"),
            pytest.param("lccn", "n78-89c0351", "n78-89c0351 is not a valid LCCN.", id="lccn"),
        ],
    )
    def test_invalid(self, field: str, value: str, message: str):
        with pytest.raises(ValidationError) as exc_info:
            Record(**{**VALID, field: value})
        [error] = exc_info.value.errors()
        assert error["loc"][0] == field
        assert message in error["msg"]


def test_normalized_by():
    validate = normalized_by(ISBN)
    assert validate("ISBN: 978-0-306-40615-7") == "9780306406157"
