"""Unit tests for storerate.core.security: bcrypt hashing and JWT round trips."""

import unittest
from datetime import timedelta

import jwt

from storerate.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("Secret#123")
        self.assertNotEqual(hashed, "Secret#123")
        self.assertTrue(verify_password("Secret#123", hashed))
        self.assertFalse(verify_password("Secret#124", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("Secret#123"), hash_password("Secret#123"))

    def test_garbage_hash_does_not_raise(self) -> None:
        self.assertFalse(verify_password("Secret#123", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    def test_round_trip_carries_id_and_role(self) -> None:
        token = create_access_token(sub=7, role="store_owner")
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["role"], "store_owner")
        self.assertIn("exp", payload)
        self.assertIn("iat", payload)

    def test_expired_token_rejected(self) -> None:
        token = create_access_token(sub=1, role="admin", expires_delta=timedelta(seconds=-5))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_tampered_token_rejected(self) -> None:
        token = create_access_token(sub=1, role="normal")
        forged = jwt.encode({"sub": "1", "role": "admin"}, "wrong-secret", algorithm="HS256")
        self.assertNotEqual(token, forged)
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(forged)


if __name__ == "__main__":
    unittest.main()
