import pytest

from argdeck.validators import always, email, one_of, range_of, regex_match


@pytest.mark.parametrize("value", [None, 0, "", "anything", object()])
def test_always_accepts_everything(value):
    assert always()(value)


@pytest.mark.parametrize("value, expected", [(i, i in {1, 3, 5}) for i in range(-2, 8)])
def test_one_of_integers(value, expected):
    assert one_of({1, 3, 5})(value) is expected


def test_one_of_accepts_any_iterable():
    validator = one_of(choice for choice in ["a", "b"])
    assert validator("a")
    assert validator("b")
    assert not validator("c")


@pytest.mark.parametrize("value", [0.0, 0.5, 0.999, 0.9999999])
def test_range_accepts_half_open_interval(value):
    assert range_of(0.0, 1.0)(value)


@pytest.mark.parametrize("value", [1.0, 1.5, -0.001, -1.0])
def test_range_rejects_outside(value):
    assert not range_of(0.0, 1.0)(value)


def test_range_integers():
    validator = range_of(1, 10)
    assert validator(1)
    assert validator(9)
    assert not validator(10)
    assert not validator(0)


def test_regex_requires_full_match():
    validator = regex_match(r"\d+")
    assert validator("123")
    assert not validator("123abc")
    assert not validator("abc123")
    assert not validator(123)


@pytest.mark.parametrize(
    "address",
    ["user@example.com", "first.last@mail.example.org", "a-b+c@d-e.co"],
)
def test_email_accepts_addresses(address):
    assert email()(address)


@pytest.mark.parametrize(
    "address",
    ["user", "user@", "@example.com", "user@example", "user@@example.com", ""],
)
def test_email_rejects_non_addresses(address):
    assert not email()(address)


@pytest.mark.parametrize("value", [True, 1.0, 3.0, "1"])
def test_one_of_requires_matching_type(value):
    assert not one_of({1, 3, 5})(value)
