from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from taskapi.core.errors import SigningError, TokenExpired, TokenInvalid
from taskapi.core.tokens import issue_refresh_token, issue_session_token, verify_session_token
from taskapi.models.refresh_token import RefreshToken
from taskapi.models.user import User

NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def user():
    return User(id=7, first_name="Alice", last_name="Smith", email="alice@mailbox.org", password="x")


class TestSessionToken:
    def test_round_trip_returns_identity_claims(self, user):
        token = issue_session_token(user, now=NOW)
        claims = verify_session_token(token, now=NOW + timedelta(minutes=30))

        assert claims["userId"] == 7
        assert claims["firstName"] == "Alice"
        assert claims["lastName"] == "Smith"
        assert claims["email"] == "alice@mailbox.org"
        assert claims["exp"] == int((NOW + timedelta(hours=1)).timestamp())

    def test_default_clock_round_trip(self, user):
        assert verify_session_token(issue_session_token(user))["email"] == user.email

    def test_deterministic_for_same_input_and_time(self, user):
        assert issue_session_token(user, now=NOW) == issue_session_token(user, now=NOW)

    def test_valid_just_before_one_hour(self, user):
        token = issue_session_token(user, now=NOW)
        verify_session_token(token, now=NOW + timedelta(minutes=59, seconds=59))

    def test_expired_at_one_hour(self, user):
        token = issue_session_token(user, now=NOW)
        with pytest.raises(TokenExpired):
            verify_session_token(token, now=NOW + timedelta(hours=1))

    def test_expired_after_one_hour(self, user):
        token = issue_session_token(user, now=NOW)
        with pytest.raises(TokenExpired):
            verify_session_token(token, now=NOW + timedelta(hours=2))

    def test_other_secret_is_invalid(self, user):
        token = issue_session_token(user, now=NOW, secret="one-secret")
        with pytest.raises(TokenInvalid):
            verify_session_token(token, now=NOW, secret="another-secret")

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_invalid(self, token):
        with pytest.raises(TokenInvalid):
            verify_session_token(token, now=NOW)

    def test_missing_claims_is_invalid(self):
        token = jwt.encode({"email": "x@mailbox.org", "exp": int(NOW.timestamp()) + 60}, "test-secret", algorithm="HS256")
        with pytest.raises(TokenInvalid):
            verify_session_token(token, now=NOW, secret="test-secret")

    def test_missing_secret_fails_to_sign(self, user):
        with pytest.raises(SigningError):
            issue_session_token(user, now=NOW, secret="")


class TestRefreshToken:
    def test_issue_persists_one_row_expiring_in_a_day(self, db):
        user = User(first_name="Bob", last_name="Jones", email="bob@mailbox.org", password="x")
        db.add(user); db.commit()

        row = issue_refresh_token(db, user, now=NOW)

        assert row.id is not None
        assert row.user_id == user.id
        assert len(row.token) >= 32
        assert row.expired_at - row.created_at == timedelta(days=1)
        assert db.query(RefreshToken).count() == 1

    def test_prior_tokens_are_kept(self, db):
        user = User(first_name="Bob", last_name="Jones", email="bob@mailbox.org", password="x")
        db.add(user); db.commit()

        first = issue_refresh_token(db, user)
        second = issue_refresh_token(db, user)

        assert first.token != second.token
        assert db.query(RefreshToken).filter_by(user_id=user.id).count() == 2
