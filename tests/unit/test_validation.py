"""
Unit tests for velora_backend.application.validation
"""
import pytest
from velora_backend.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from velora_backend.application.dto.review_dto import ReviewCreateRequest
from velora_backend.application.validation import (
    validate_login,
    validate_registration,
    validate_review,
)
from velora_backend.core.messages import EN, RU


def _registration(**overrides) -> UserRegistrationRequest:
    fields = {"name": "Alice", "email": "alice@example.com", "password": "secret1"}
    fields.update(overrides)
    return UserRegistrationRequest(**fields)


class TestValidateRegistration:
    def test_valid(self):
        assert validate_registration(_registration(), EN) is None

    @pytest.mark.parametrize("field", ["name", "email", "password"])
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_field(self, field, value):
        request = _registration(**{field: value})
        assert validate_registration(request, EN) == EN.register_fields_required

    def test_password_too_short(self):
        assert validate_registration(_registration(password="12345"), EN) == EN.password_too_short

    def test_password_of_six_characters_is_enough(self):
        assert validate_registration(_registration(password="123456"), EN) is None

    @pytest.mark.parametrize(
        "email",
        ["alice", "alice@example", "@example.com", "alice@.com", "al ice@example.com", "alice@@example.com"],
    )
    def test_invalid_email(self, email):
        assert validate_registration(_registration(email=email), EN) == EN.invalid_email

    def test_password_checked_before_email(self):
        request = _registration(email="broken", password="123")
        assert validate_registration(request, EN) == EN.password_too_short

    def test_uses_catalog_for_locale(self):
        assert validate_registration(_registration(password="1"), RU) == RU.password_too_short


class TestValidateLogin:
    def test_valid(self):
        request = UserLoginRequest(email="alice@example.com", password="x")
        assert validate_login(request, EN) is None

    @pytest.mark.parametrize(
        "email,password",
        [(None, "secret1"), ("alice@example.com", None), ("", ""), ("  ", "secret1")],
    )
    def test_missing_field(self, email, password):
        request = UserLoginRequest(email=email, password=password)
        assert validate_login(request, EN) == EN.login_fields_required


class TestValidateReview:
    def test_valid(self):
        request = ReviewCreateRequest(author="Jo", text="1234567890")
        assert validate_review(request, EN) is None

    @pytest.mark.parametrize("author,text", [(None, "1234567890"), ("Jo", None), ("", ""), ("Jo", "   ")])
    def test_missing_field(self, author, text):
        request = ReviewCreateRequest(author=author, text=text)
        assert validate_review(request, EN) == EN.review_fields_required

    def test_author_too_short(self):
        request = ReviewCreateRequest(author="J", text="1234567890")
        assert validate_review(request, EN) == EN.author_too_short

    def test_text_too_short(self):
        request = ReviewCreateRequest(author="Jo", text="123456789")
        assert validate_review(request, EN) == EN.text_too_short

    def test_length_uses_raw_value(self):
        """Lengths are checked before the store trims the values."""
        request = ReviewCreateRequest(author=" J", text=" 123456789")
        assert validate_review(request, EN) is None
