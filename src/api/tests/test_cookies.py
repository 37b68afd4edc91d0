"""Tests for SessionCookieManager attribute policy."""

import unittest

from fastapi import Response
from starlette.requests import Request

from api.cookies import SESSION_COOKIE_NAME, SessionCookieManager


def _request_with_cookie(header: str | None) -> Request:
    headers = [(b"cookie", header.encode())] if header else []
    return Request({"type": "http", "method": "POST", "path": "/", "headers": headers})


class TestSessionCookieManager(unittest.TestCase):

    def test_production_cookie_is_secure(self):
        response = Response()
        SessionCookieManager(max_age=60, secure=True).set(response, SESSION_COOKIE_NAME, "abc")

        header = response.headers["set-cookie"]
        self.assertTrue(header.startswith("token=abc"))
        self.assertIn("Secure", header)
        self.assertIn("HttpOnly", header)
        self.assertIn("Max-Age=60", header)

    def test_clear_expires_cookie_with_same_attributes(self):
        response = Response()
        SessionCookieManager(max_age=60, secure=True, samesite="lax").clear(response, SESSION_COOKIE_NAME)

        header = response.headers["set-cookie"]
        self.assertTrue(header.startswith('token=""'))
        self.assertIn("Max-Age=0", header)
        self.assertIn("Secure", header)
        self.assertIn("SameSite=lax", header)

    def test_get_present_and_absent(self):
        manager = SessionCookieManager(max_age=60, secure=False)

        self.assertEqual(manager.get(_request_with_cookie("token=abc"), SESSION_COOKIE_NAME), "abc")
        self.assertIsNone(manager.get(_request_with_cookie(None), SESSION_COOKIE_NAME))
        self.assertIsNone(manager.get(_request_with_cookie("other=1"), SESSION_COOKIE_NAME))


if __name__ == '__main__':
    unittest.main()
