import pytest
from rest_framework.exceptions import ValidationError

from apps.users.dtos import AddressDTO, LoginResult, UserDTO
from apps.users.serializers import (
    CreateUserSerializer,
    LoginResponseSerializer,
    UpdateUserSerializer,
    UserSerializer,
)


def _create_payload(**overrides):
    data = {
        "email": "a@x.com",
        "password": "p",
        "name": "A",
        "age": 20,
        "country": "KR",
        "city": "Seoul",
        "street": "Main",
        "zipCode": "000",
    }
    data.update(overrides)
    return data


def test_create_serializer_maps_zip_code_to_model_field():
    serializer = CreateUserSerializer(data=_create_payload())
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["zip_code"] == "000"
    assert "zipCode" not in serializer.validated_data


def test_create_serializer_requires_every_address_field():
    payload = _create_payload()
    del payload["street"]
    serializer = CreateUserSerializer(data=payload)
    with pytest.raises(ValidationError) as exc:
        serializer.is_valid(raise_exception=True)
    assert "street" in exc.value.detail


def test_create_serializer_rejects_negative_age_and_bad_email():
    serializer = CreateUserSerializer(data=_create_payload(age=-3, email="nope"))
    assert not serializer.is_valid()
    assert set(serializer.errors) == {"age", "email"}


def test_create_serializer_keeps_password_whitespace():
    serializer = CreateUserSerializer(data=_create_payload(password=" spaced "))
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["password"] == " spaced "


def test_update_serializer_accepts_partial_payload():
    serializer = UpdateUserSerializer(data={"age": 30}, partial=True)
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data == {"age": 30}


def test_update_serializer_rejects_empty_payload():
    serializer = UpdateUserSerializer(data={}, partial=True)
    assert not serializer.is_valid()


def test_update_serializer_ignores_unknown_fields():
    serializer = UpdateUserSerializer(data={"name": "B", "address": 5}, partial=True)
    assert serializer.is_valid(), serializer.errors
    assert dict(serializer.validated_data) == {"name": "B"}


def test_user_serializer_renders_address_without_password():
    dto = UserDTO(
        id=3,
        email="a@x.com",
        name="A",
        age=20,
        address=AddressDTO(id=8, country="KR", city="Seoul", street="Main", zip_code="000"),
    )
    data = UserSerializer(dto).data
    assert data["address"] == {
        "id": 8,
        "country": "KR",
        "city": "Seoul",
        "street": "Main",
        "zipCode": "000",
    }
    assert "password" not in data


def test_login_response_uses_camel_case_token_key():
    data = LoginResponseSerializer(LoginResult(access_token="t")).data
    assert data == {"accessToken": "t"}


def test_age_is_capped_at_positive_integer_column_limit():
    too_old = CreateUserSerializer(data=_create_payload(age=2147483648))
    assert not too_old.is_valid()
    assert set(too_old.errors) == {"age"}
    assert CreateUserSerializer(data=_create_payload(age=2147483647)).is_valid()
    update = UpdateUserSerializer(data={"age": 2147483648}, partial=True)
    assert not update.is_valid()


def test_user_serializer_address_is_not_nullable():
    assert UserSerializer().fields["address"].allow_null is False
