import pytest

from authcookie import (
    MIN_LENGTH,
    Cookie,
    MalformedCookieError,
    WrongSignatureError,
    issue,
    issue_relative,
    login_if_valid,
    verify,
)
from authcookie.utils.time import unix_now

KNOWN = "hello world|42|f6fa3cab7daff3788eb02095fb470e56ed9084ef5d7a6ffd2fe29ee6929b9880"


def test_issue_known_answer() -> None:
    assert issue("hello world", 42, b"secret key") == KNOWN
    assert issue("hello world", 42, "secret key") == KNOWN


def test_issue_empty_login_returns_empty_string() -> None:
    assert issue("", 1700000000, "secret key") == ""


def test_issue_rejects_out_of_range_expiration() -> None:
    with pytest.raises(ValueError):
        issue("bender", -1, "secret key")


def test_issue_relative_uses_injected_clock() -> None:
    assert issue_relative("bender", 60, "k", now=1000) == issue("bender", 1060, "k")


def test_issue_relative_defaults_to_current_time() -> None:
    before = unix_now()
    cookie = verify(issue_relative("bender", 120, "k"), "k")
    assert before + 120 <= cookie.expires <= unix_now() + 120


@pytest.mark.parametrize("login", ["bender", "~~~!|zoidberg|!~~~", "ünïcødé", "a"])
def test_verify_round_trip(login: str) -> None:
    token = issue(login, 1700000000, "another secret key")
    assert verify(token, "another secret key") == Cookie(login=login, expires=1700000000)


def test_concrete_scenario() -> None:
    token = issue("bender", 1700000000, "secret key")
    assert verify(token, "secret key") == Cookie(login="bender", expires=1700000000)
    with pytest.raises(WrongSignatureError):
        verify(token, "wrong key")
    with pytest.raises(MalformedCookieError):
        verify(token[:-1], "secret key")


@pytest.mark.parametrize(
    "cookie",
    [
        "bad|1234567890|f6fa3cab7daff3788eb02095fb470e56ed9084ef5d7a6ffd2fe29ee6929b9880",
        "hello world|43|f6fa3cab7daff3788eb02095fb470e56ed9084ef5d7a6ffd2fe29ee6929b9880",
        "helloworld|42|f6fa3cab7daff3788eb02095fb470e56ed9084ef5d7a6ffd2fe29ee6929b9880",
        "hello world|42|f0fa3cab7daff3788eb02095fb470e56ed9084ef5d7a6ffd2fe29ee6929b9880",
    ],
)
def test_verify_rejects_forged(cookie: str) -> None:
    with pytest.raises(WrongSignatureError):
        verify(cookie, "secret key")


@pytest.mark.parametrize("cookie", ["badcookie", "bad|cookie", "bad|cookie|again"])
def test_verify_rejects_malformed(cookie: str) -> None:
    with pytest.raises(MalformedCookieError):
        verify(cookie, "secret key")


def test_any_tag_bit_flip_is_wrong_signature() -> None:
    token = issue("bender", 1700000000, "secret key")
    prefix, sig_hex = token.rsplit("|", 1)
    tag = bytes.fromhex(sig_hex)
    for i in range(len(tag) * 8):
        flipped = bytearray(tag)
        flipped[i // 8] ^= 1 << (i % 8)
        with pytest.raises(WrongSignatureError):
            verify(f"{prefix}|{flipped.hex()}", "secret key")


def test_any_truncation_is_malformed() -> None:
    token = issue("bender", 1700000000, "secret key")
    for cut in range(1, len(token) + 1):
        with pytest.raises(MalformedCookieError):
            verify(token[:-cut], "secret key")


def test_wrong_key_rejected() -> None:
    token = issue("bender", 1700000000, "key one")
    with pytest.raises(WrongSignatureError):
        verify(token, "key two")


def test_expired_cookie_still_verifies() -> None:
    token = issue("bender", 1000, "secret key")
    cookie = verify(token, "secret key")
    assert cookie.expires == 1000
    assert cookie.is_expired(1001) is True
    assert cookie.expires_at.year == 1970


def test_login_if_valid() -> None:
    login = "~~~!|zoidberg|!~~~"
    key = "(:€"
    now = 1700000000
    token = issue(login, now + 120, key)
    assert login_if_valid(token, key, now=now) == login
    assert login_if_valid("no" + token, key, now=now) == ""
    assert login_if_valid(token, "other key", now=now) == ""
    assert login_if_valid(token[:-1], key, now=now) == ""


def test_login_if_valid_rejects_expired() -> None:
    now = 1700000000
    token = issue("bender", now - 30, "secret key")
    assert login_if_valid(token, "secret key", now=now) == ""
    assert login_if_valid(token, "secret key", now=now - 30) == "bender"


def test_login_if_valid_uses_current_time_by_default() -> None:
    assert login_if_valid(issue_relative("bender", 120, "k"), "k") == "bender"
    assert login_if_valid(issue_relative("bender", -30, "k"), "k") == ""


def test_min_length_reexported() -> None:
    assert len(issue("a", 0, "k")) == MIN_LENGTH


@pytest.mark.parametrize("expires", [1700000000.0, True, "1700000000"])
def test_issue_rejects_non_int_expiration(expires) -> None:
    with pytest.raises(TypeError):
        issue("bender", expires, "k")


def test_issue_relative_rejects_float_seconds() -> None:
    with pytest.raises(TypeError):
        issue_relative("bender", 3600.0, "k", now=1700000000)


def test_issue_rejects_non_text_login() -> None:
    with pytest.raises(TypeError):
        issue(b"bender", 1700000000, "k")
    with pytest.raises(ValueError):
        issue("bender\ud800", 1700000000, "k")


def test_login_if_valid_empty_secret_raises() -> None:
    token = issue("bender", 1700000000, "k")
    with pytest.raises(ValueError):
        login_if_valid(token, "", now=1700000000)
