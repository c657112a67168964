import pytest

from routing.coordinates import all_valid_coordinates, is_valid_coordinate


@pytest.mark.parametrize("value", [
    "90,180",
    "90.0,180.0",
    "-90,-180",
    "+45.5,-122.25",
    "0,0",
    "13.388860,52.517037",
    "89.999999,179.999999",
])
def test_valid_coordinates(value):
    assert is_valid_coordinate(value)


@pytest.mark.parametrize("value", [
    "90.1,180",
    "91,0",
    "0,180.5",
    "0,181",
    "13.388860",          # no comma
    "13.388860;52.517037",
    "13.388860, 52.517037",  # whitespace
    " 13.388860,52.517037",
    "13.388860,52.517037\n",
    "1e1,20",             # exponent
    "abc,def",
    "1.,2",
    "1,2,3",
    "",
    "invalid",
    # non-ASCII decimal digits
    "٥,٥",
    "1.٥,2",
    "52.５,13.٣",
])
def test_invalid_coordinates(value):
    assert not is_valid_coordinate(value)


def test_non_string_is_invalid():
    assert not is_valid_coordinate(None)
    assert not is_valid_coordinate(13.3)


def test_all_valid_coordinates_requires_every_element():
    assert all_valid_coordinates(["13.397634,52.529407", "13.428555,52.523219"])
    assert not all_valid_coordinates(["13.428555,52.523219", "invalid"])
    assert all_valid_coordinates([])
