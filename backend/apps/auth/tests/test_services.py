import unittest

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from apps.auth.container import build_credential_service
from apps.auth.services import CredentialService


class FakeUser:
    def __init__(self, user_id):
        self.id = user_id


class CredentialServiceTests(unittest.TestCase):
    def setUp(self):
        self.service = CredentialService()

    def test_hash_password_never_returns_plaintext(self):
        hashed = self.service.hash_password("p")
        self.assertNotEqual(hashed, "p")
        self.assertTrue(self.service.verify_password("p", hashed))
        self.assertFalse(self.service.verify_password("q", hashed))

    def test_hashes_are_salted(self):
        self.assertNotEqual(
            self.service.hash_password("same"), self.service.hash_password("same")
        )

    def test_hash_password_rejects_none(self):
        with self.assertRaises(ValueError):
            self.service.hash_password(None)

    def test_verify_password_handles_blank_inputs(self):
        self.assertFalse(self.service.verify_password("", "whatever"))
        self.assertFalse(self.service.verify_password("p", ""))

    def test_generate_jwt_embeds_user_id(self):
        token = self.service.generate_jwt(FakeUser(42))
        decoded = AccessToken(token)
        self.assertEqual(str(decoded["user_id"]), "42")
        self.assertEqual(decoded["token_type"], "access")

    def test_tampered_token_is_rejected(self):
        token = self.service.generate_jwt(FakeUser(1))
        with self.assertRaises(TokenError):
            AccessToken(token[:-2] + ("AA" if not token.endswith("AA") else "BB"))

    def test_container_builds_service(self):
        self.assertIsInstance(build_credential_service(), CredentialService)
