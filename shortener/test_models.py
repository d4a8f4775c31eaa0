import pytest

from shortener.exceptions import ValidationError
from shortener.models import validate_login, validate_registration

VALID = {"userName": "alice", "email": "alice@x.com", "password": "Abcd1234!"}


def _message(fn, payload) -> str:
    with pytest.raises(ValidationError) as exc:
        fn(payload)
    assert exc.value.status_code == 400
    return exc.value.message


def test_valid_registration():
    user = validate_registration(VALID)
    assert user.userName == "alice"
    assert user.email == "alice@x.com"


@pytest.mark.parametrize(
    "password, expected",
    [
        ("Ab1!", '"Password" should be at least 8 characters long'),
        ("Abcd1234!" * 3, '"Password" should not be longer than 26 characters'),
        ("ABCD1234!", '"Password" should contain at least 1 lower-cased letter'),
        ("abcd1234!", '"Password" should contain at least 1 upper-cased letter'),
        ("Abcdefgh!", '"Password" should contain at least 1 number'),
        ("Abcd12345", '"Password" should contain at least 1 symbol'),
    ],
)
def test_password_complexity(password, expected):
    assert _message(validate_registration, {**VALID, "password": password}) == expected


def test_username_too_long():
    msg = _message(validate_registration, {**VALID, "userName": "a" * 256})
    assert msg == '"Username" length must be less than or equal to 255 characters long'


def test_missing_fields():
    assert _message(validate_registration, {"email": "a@b.co", "password": "Abcd1234!"}) == '"Username" is required'
    assert _message(validate_registration, {"userName": "alice", "password": "Abcd1234!"}) == '"email" is required'


def test_non_string_field():
    assert _message(validate_registration, {**VALID, "userName": 12345}) == '"Username" must be a string'


def test_unknown_field_rejected():
    assert _message(validate_registration, {**VALID, "role": "admin"}) == '"role" is not allowed'


def test_only_first_violation_reported():
    msg = _message(validate_registration, {"userName": "ab", "email": "bad", "password": "a"})
    assert msg == '"Username" length must be at least 3 characters long'


def test_non_object_payload():
    assert _message(validate_registration, ["alice"]) == '"value" must be of type object'


def test_login_username_optional():
    creds = validate_login({"email": "alice@x.com", "password": "anything"})
    assert creds.userName is None


def test_login_skips_complexity():
    assert validate_login({"email": "alice@x.com", "password": "wrong"}).password == "wrong"


def test_login_empty_password():
    assert _message(validate_login, {"email": "alice@x.com", "password": ""}) == '"Password" is not allowed to be empty'


def test_login_short_username_still_checked():
    msg = _message(validate_login, {"userName": "ab", "email": "alice@x.com", "password": "x"})
    assert msg == '"Username" length must be at least 3 characters long'


def test_multibyte_password_over_bcrypt_limit():
    # 26 characters but 92 bytes once encoded
    msg = _message(validate_registration, {**VALID, "password": "Aa1!" + "\U0001F600" * 22})
    assert msg == '"Password" should not be longer than 72 bytes'


def test_empty_username():
    assert _message(validate_registration, {**VALID, "userName": ""}) == '"Username" is not allowed to be empty'


def test_empty_password_at_registration():
    assert _message(validate_registration, {**VALID, "password": ""}) == '"Password" is not allowed to be empty'


def test_login_long_password_passes_validation():
    assert validate_login({"email": "alice@x.com", "password": "x" * 100}).password == "x" * 100
