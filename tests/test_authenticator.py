import time

import jwt
import pytest

from cloudjobs.authenticator import JWT_ALG, Authenticator, verification_token, verify_token
from cloudjobs.config import configure
from cloudjobs.errors import ConfigurationError

SECRET = "unit-test-signing-secret-0123456789"


def test_fresh_token_verifies():
    auth = Authenticator(SECRET, ttl=60)
    assert auth.verify(auth.issue())


def test_token_uses_hs256():
    token = Authenticator(SECRET).issue()
    assert jwt.get_unverified_header(token)["alg"] == JWT_ALG == "HS256"


def test_token_signed_with_another_secret_fails():
    token = Authenticator("another-signing-secret-of-32-bytes!").issue()
    assert not Authenticator(SECRET).verify(token)


def test_tampered_signature_fails():
    auth = Authenticator(SECRET)
    header, payload, signature = auth.issue().split(".")
    forged = signature[:5] + ("A" if signature[5] != "A" else "B") + signature[6:]
    assert not auth.verify(".".join([header, payload, forged]))


def test_tampered_claims_fail():
    auth = Authenticator(SECRET)
    header, _, signature = auth.issue().split(".")
    other_payload = Authenticator(SECRET, ttl=3600).issue().split(".")[1]
    assert not auth.verify(".".join([header, other_payload, signature]))


def test_wrong_algorithm_fails():
    token = jwt.encode({"iat": int(time.time())}, SECRET, algorithm="HS512")
    assert not Authenticator(SECRET).verify(token)


def test_unsigned_token_fails():
    token = jwt.encode({"iat": int(time.time())}, "", algorithm="none")
    assert not Authenticator(SECRET).verify(token)


def test_token_without_iat_fails():
    token = jwt.encode({"sub": "x"}, SECRET, algorithm=JWT_ALG)
    assert not Authenticator(SECRET).verify(token)


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
def test_malformed_tokens_fail(token):
    assert not Authenticator(SECRET).verify(token)


def test_expired_token_fails():
    issued_at = int(time.time()) - 120
    token = jwt.encode({"iat": issued_at, "exp": issued_at + 60}, SECRET, algorithm=JWT_ALG)
    assert not Authenticator(SECRET, ttl=60).verify(token)


def test_expiry_window_starts_at_not_before():
    auth = Authenticator(SECRET, ttl=60)
    run_at = time.time() + 3600
    claims = jwt.decode(auth.issue(not_before=run_at), SECRET, algorithms=[JWT_ALG])
    assert claims["exp"] == int(run_at) + 60


def test_no_ttl_means_no_expiry_claim():
    claims = jwt.decode(Authenticator(SECRET).issue(), SECRET, algorithms=[JWT_ALG])
    assert "exp" not in claims


def test_missing_secret_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        Authenticator("")


def test_module_helpers_use_configured_secret():
    configure(secret="configured-signing-secret-32-bytes-x")
    token = verification_token()
    assert verify_token(token)
    assert Authenticator("configured-signing-secret-32-bytes-x").verify(token)
    configure(secret="rotated-signing-secret-of-32-bytes-x")
    assert not verify_token(token)


def test_token_without_expiry_fails_once_ttl_is_enabled():
    token = Authenticator(SECRET).issue()
    assert Authenticator(SECRET).verify(token)
    assert not Authenticator(SECRET, ttl=3600).verify(token)
