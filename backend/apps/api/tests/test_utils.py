import unittest

from rest_framework import status
from rest_framework.exceptions import ValidationError

from apps.api.utils import error_response, resolve_status


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "there is no user with ID 4", {"id": "4"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": "4"})

    def test_conflict_maps_to_409(self):
        resp = error_response("conflict", "a@x.com is already created user.")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.data["error"]["code"], "CONFLICT")
        self.assertNotIn("details", resp.data["error"])

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_unknown_code_falls_back_to_bad_request(self):
        self.assertEqual(resolve_status("SOMETHING_ELSE"), status.HTTP_400_BAD_REQUEST)

    def test_error_response_supports_hint_and_extra(self):
        resp = error_response(
            "UNAUTHORIZED",
            "Invalid credentials",
            hint="Check the email and password",
            extra={"field": "password"},
        )
        payload = resp.data["error"]
        self.assertEqual(payload["hint"], "Check the email and password")
        self.assertEqual(payload["extra"], {"field": "password"})

    def test_validation_error_details_are_normalized(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Invalid input",
            ValidationError({"email": ["Enter a valid email address."]}),
        )
        self.assertEqual(
            resp.data["error"]["details"], {"email": ["Enter a valid email address."]}
        )

    def test_rejects_blank_code_and_message(self):
        with self.assertRaises(ValueError):
            error_response("   ", "message")
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "")
        with self.assertRaises(TypeError):
            error_response(404, "message")

    def test_rejects_out_of_range_status(self):
        with self.assertRaises(ValueError):
            error_response("SERVER_ERROR", "boom", http_status=700)
