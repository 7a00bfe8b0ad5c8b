"""Тесты хеширования паролей и токенов сессии."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from notekeeper.core.exceptions import InvalidInput
from notekeeper.core.security import CredentialHasher, SessionIssuer

from conftest import TEST_SECRET


class TestCredentialHasher:
    """Хеш солёный, проверка никогда не бросает исключений."""

    @pytest.mark.unit
    def test_hash_is_not_plaintext_and_verifies(self, hasher):
        digest = hasher.hash("pw123")
        assert digest != "pw123"
        assert "pw123" not in digest
        assert hasher.verify("pw123", digest) is True

    @pytest.mark.unit
    def test_same_password_gets_different_salt(self, hasher):
        assert hasher.hash("pw123") != hasher.hash("pw123")

    @pytest.mark.unit
    def test_wrong_password_is_rejected(self, hasher):
        digest = hasher.hash("pw123")
        assert hasher.verify("wrong", digest) is False

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "digest",
        [
            "not-a-hash",
            "$pbkdf2-sha256$broken",
            "$2b$12$tooshort",
            "",
            None,
        ],
    )
    def test_malformed_digest_returns_false(self, hasher, digest):
        assert hasher.verify("pw123", digest) is False

    @pytest.mark.unit
    def test_empty_password_returns_false(self, hasher):
        digest = hasher.hash("pw123")
        assert hasher.verify("", digest) is False
        assert hasher.verify(None, digest) is False

    @pytest.mark.unit
    def test_digest_from_other_configured_scheme_still_verifies(self):
        """Старые хеши проверяются, если схема осталась в списке."""
        old = CredentialHasher(["pbkdf2_sha512"])
        digest = old.hash("pw123")

        current = CredentialHasher(["pbkdf2_sha256", "pbkdf2_sha512"])
        assert current.verify("pw123", digest) is True
        assert current.pwd_context.needs_update(digest)

    @pytest.mark.unit
    def test_digest_from_unconfigured_scheme_returns_false(self):
        digest = CredentialHasher(["pbkdf2_sha512"]).hash("pw123")
        assert CredentialHasher(["pbkdf2_sha256"]).verify("pw123", digest) is False

    @pytest.mark.unit
    def test_oversized_password_is_invalid_input(self, hasher):
        with pytest.raises(InvalidInput):
            hasher.hash("x" * 5000)


class TestSessionIssuer:
    """Подпись, срок жизни и структура токена."""

    @pytest.mark.unit
    def test_issue_then_verify_returns_subject(self, issuer):
        token = issuer.issue("u1")
        assert issuer.verify(token) == "u1"

    @pytest.mark.unit
    def test_token_is_valid_for_seven_days(self, issuer):
        before = datetime.now(timezone.utc)
        claims = jwt.get_unverified_claims(issuer.issue("u1"))

        assert claims["sub"] == "u1"
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())
        assert claims["iat"] >= int(before.timestamp()) - 1

    @pytest.mark.unit
    def test_expired_token_is_rejected(self, issuer):
        token = issuer.issue("u1", expires_delta=timedelta(seconds=-5))
        assert issuer.verify(token) is None

    @pytest.mark.unit
    def test_token_signed_with_other_secret_is_rejected(self, issuer):
        foreign = SessionIssuer("another-secret").issue("u1")
        assert issuer.verify(foreign) is None

    @pytest.mark.unit
    def test_tampered_payload_is_rejected(self, issuer):
        header, _, signature = issuer.issue("u1").split(".")
        forged_payload = SessionIssuer("x").issue("admin").split(".")[1]
        assert issuer.verify(f"{header}.{forged_payload}.{signature}") is None

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["", None, "garbage", "a.b.c", "invalid.jwt.token"])
    def test_malformed_token_is_rejected(self, issuer, token):
        assert issuer.verify(token) is None

    @pytest.mark.unit
    def test_token_without_subject_is_rejected(self, issuer):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = jwt.encode({"exp": exp}, TEST_SECRET, algorithm="HS256")
        assert issuer.verify(token) is None

    @pytest.mark.unit
    def test_token_without_expiry_is_rejected(self, issuer):
        token = jwt.encode({"sub": "u1"}, TEST_SECRET, algorithm="HS256")
        assert issuer.verify(token) is None

    @pytest.mark.unit
    def test_empty_secret_is_refused(self):
        with pytest.raises(ValueError):
            SessionIssuer("")
