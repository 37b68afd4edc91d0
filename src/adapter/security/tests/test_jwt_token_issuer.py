"""Unit tests for JWTTokenIssuer: signing, verification and rotation."""

import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from adapter.security.jwt_token_issuer import JWT_ALGORITHM, JWTTokenIssuer
from domain.model.account import Role, SessionClaims
from domain.model.errors import (
    TokenError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMalformedError,
)

SECRET = 'test-secret-key'


class TestJWTTokenIssuer(unittest.TestCase):

    def setUp(self):
        self.issuer = JWTTokenIssuer(SECRET, expires_in_seconds=3600)
        self.claims = SessionClaims(account_id='acc-1', email='ana@x.com', role=Role.USER)

    # ── issue + verify ────────────────────────────────────────

    def test_round_trip_returns_same_identity(self):
        verified = self.issuer.verify(self.issuer.issue(self.claims))

        self.assertEqual(verified.account_id, 'acc-1')
        self.assertEqual(verified.email, 'ana@x.com')
        self.assertEqual(verified.role, Role.USER)

    def test_round_trip_admin_role(self):
        claims = SessionClaims(account_id='acc-2', email='root@x.com', role=Role.ADMIN)
        self.assertEqual(self.issuer.verify(self.issuer.issue(claims)).role, Role.ADMIN)

    def test_expiry_matches_configured_lifetime(self):
        verified = self.issuer.verify(self.issuer.issue(self.claims))

        self.assertEqual(verified.expires_at - verified.issued_at, timedelta(seconds=3600))
        self.assertEqual(self.issuer.max_age_seconds, 3600)

    def test_payload_uses_wire_claim_names(self):
        payload = jwt.get_unverified_claims(self.issuer.issue(self.claims))
        self.assertEqual(set(payload), {'accountId', 'email', 'role', 'iat', 'exp'})

    # ── failures ──────────────────────────────────────────────

    def test_token_signed_with_other_secret_is_invalid(self):
        other = JWTTokenIssuer('another-secret')
        with self.assertRaises(TokenInvalidError):
            self.issuer.verify(other.issue(self.claims))

    def test_expired_token(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {'accountId': 'acc-1', 'email': 'ana@x.com', 'role': 'user',
             'iat': past, 'exp': past + timedelta(hours=1)},
            SECRET,
            algorithm=JWT_ALGORITHM,
        )
        with self.assertRaises(TokenExpiredError):
            self.issuer.verify(token)

    def test_garbage_is_malformed(self):
        with self.assertRaises(TokenMalformedError):
            self.issuer.verify('not-a-token')

    def test_missing_claims_is_malformed(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode({'email': 'ana@x.com', 'iat': now, 'exp': now + timedelta(minutes=5)},
                           SECRET, algorithm=JWT_ALGORITHM)
        with self.assertRaises(TokenMalformedError):
            self.issuer.verify(token)

    def test_unknown_role_is_malformed(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {'accountId': 'acc-1', 'email': 'ana@x.com', 'role': 'superuser',
             'iat': now, 'exp': now + timedelta(minutes=5)},
            SECRET,
            algorithm=JWT_ALGORITHM,
        )
        with self.assertRaises(TokenMalformedError):
            self.issuer.verify(token)

    def test_failures_share_base_class(self):
        for token in ('not-a-token', JWTTokenIssuer('x').issue(self.claims)):
            with self.assertRaises(TokenError):
                self.issuer.verify(token)

    # ── rotation ──────────────────────────────────────────────

    def test_rotation_invalidates_outstanding_tokens(self):
        old_token = self.issuer.issue(self.claims)

        self.issuer.rotate_secret('rotated-secret')

        with self.assertRaises(TokenInvalidError):
            self.issuer.verify(old_token)
        self.assertEqual(self.issuer.verify(self.issuer.issue(self.claims)).account_id, 'acc-1')

    def test_empty_secret_rejected(self):
        with self.assertRaises(ValueError):
            JWTTokenIssuer('')
        with self.assertRaises(ValueError):
            self.issuer.rotate_secret('')


if __name__ == '__main__':
    unittest.main()
