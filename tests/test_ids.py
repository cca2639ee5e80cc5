import pytest

from myflix.domain.exceptions import InvalidIdentifierError
from myflix.utils.ids import is_valid_id, new_id, require_valid_id


def test_new_id_is_valid():
    assert is_valid_id(new_id())


def test_require_valid_id_returns_lowercase_form():
    movie_id = new_id()

    assert require_valid_id(movie_id.upper(), "movie") == movie_id


@pytest.mark.parametrize("value", ["not-an-id", "", "a" * 23, "g" * 24, None])
def test_require_valid_id_rejects_malformed_values(value):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        require_valid_id(value, "movie")

    assert exc_info.value.message == f"'{value}' is not a valid movie id"
