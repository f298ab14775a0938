"""Tests for session token issuing and verification."""

import base64
import json
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from authdemo.services.tokens import SessionClaims, TokenService

SECRET = "unit-test-secret"  # noqa: S105
ISSUED = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Settable clock for expiry tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(ISSUED)


@pytest.fixture
def service(clock):
    return TokenService(secret=SECRET, clock=clock)


class TestIssueAndVerify:
    """Round trip through issue() and verify()."""

    def test_verify_returns_original_claims(self, service):
        token = service.issue(7, "a@b.com", "A B")

        claims = service.verify(token)

        assert claims == SessionClaims(
            id=7,
            email="a@b.com",
            name="A B",
            issued_at=ISSUED,
            expires_at=ISSUED + timedelta(hours=24),
        )

    def test_token_is_compact_jws(self, service):
        token = service.issue(7, "a@b.com", "A B")
        assert token.count(".") == 2

    def test_default_lifetime_is_24_hours(self, service):
        assert service.ttl_seconds == 24 * 60 * 60

    def test_payload_uses_registered_claim_names(self, service):
        token = service.issue(7, "a@b.com", "A B")
        payload = jwt.get_unverified_claims(token)
        assert payload["sub"] == "7"
        assert payload["exp"] - payload["iat"] == 24 * 60 * 60


class TestExpiry:
    """Expiry is checked against the injected clock."""

    def test_valid_just_before_expiry(self, service, clock):
        token = service.issue(7, "a@b.com", "A B")
        clock.now = ISSUED + timedelta(hours=24) - timedelta(seconds=1)
        assert service.verify(token) is not None

    def test_rejected_at_expiry(self, service, clock):
        token = service.issue(7, "a@b.com", "A B")
        clock.now = ISSUED + timedelta(hours=24)
        assert service.verify(token) is None

    def test_rejected_after_expiry(self, service, clock):
        token = service.issue(7, "a@b.com", "A B")
        clock.now = ISSUED + timedelta(days=3)
        assert service.verify(token) is None

    def test_custom_ttl(self, clock):
        service = TokenService(secret=SECRET, ttl=timedelta(minutes=5), clock=clock)
        token = service.issue(7, "a@b.com", "A B")
        clock.now = ISSUED + timedelta(minutes=5)
        assert service.verify(token) is None


class TestFailsClosed:
    """Anything but a good token verifies to None."""

    def test_foreign_secret_rejected(self, service, clock):
        other = TokenService(secret="some-other-secret", clock=clock)  # noqa: S106
        assert service.verify(other.issue(7, "a@b.com", "A B")) is None

    def test_tampered_payload_rejected(self, service):
        header, _, signature = service.issue(7, "a@b.com", "A B").split(".")
        forged = {"sub": "1", "email": "admin@b.com", "name": "Admin", "iat": 0, "exp": 2**40}
        payload = base64.urlsafe_b64encode(json.dumps(forged).encode()).rstrip(b"=").decode()
        assert service.verify(f"{header}.{payload}.{signature}") is None

    def test_unexpected_algorithm_rejected(self, service):
        token = jwt.encode(
            {"sub": "7", "email": "a@b.com", "name": "A B", "iat": 0, "exp": 2**40},
            SECRET,
            algorithm="HS512",
        )
        assert service.verify(token) is None

    def test_missing_claims_rejected(self, service):
        token = jwt.encode({"sub": "7"}, SECRET, algorithm="HS256")
        assert service.verify(token) is None

    def test_non_numeric_subject_rejected(self, service):
        token = jwt.encode(
            {"sub": "abc", "email": "a@b.com", "name": "A B", "iat": 0, "exp": 2**40},
            SECRET,
            algorithm="HS256",
        )
        assert service.verify(token) is None

    @pytest.mark.parametrize("sub", ["²", "٣", "7 ", "-7"])
    def test_non_ascii_or_signed_subject_rejected(self, service, sub):
        token = jwt.encode(
            {"sub": sub, "email": "a@b.com", "name": "A B", "iat": 0, "exp": 2**40},
            SECRET,
            algorithm="HS256",
        )
        assert service.verify(token) is None

    @pytest.mark.parametrize(("iat", "exp"), [(0, 10**20), (-(10**20), 2**40)])
    def test_out_of_range_timestamps_rejected(self, service, iat, exp):
        token = jwt.encode(
            {"sub": "7", "email": "a@b.com", "name": "A B", "iat": iat, "exp": exp},
            SECRET,
            algorithm="HS256",
        )
        assert service.verify(token) is None

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c", "...."])
    def test_malformed_tokens_rejected(self, service, token):
        assert service.verify(token) is None


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        TokenService(secret="")
