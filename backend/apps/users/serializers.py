from rest_framework import serializers

# Upper bound of the PositiveIntegerField column on every supported backend.
MAX_AGE = 2147483647


class AddressSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    country = serializers.CharField()
    city = serializers.CharField()
    street = serializers.CharField()
    zipCode = serializers.CharField(source="zip_code")


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    email = serializers.EmailField()
    name = serializers.CharField()
    age = serializers.IntegerField()
    address = AddressSerializer(read_only=True)


class CreateUserSerializer(serializers.Serializer):
    """Flat registration payload; address fields travel alongside the user's."""

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    name = serializers.CharField(max_length=100)
    age = serializers.IntegerField(min_value=0, max_value=MAX_AGE)
    country = serializers.CharField(max_length=100)
    city = serializers.CharField(max_length=100)
    street = serializers.CharField(max_length=150)
    zipCode = serializers.CharField(source="zip_code", max_length=20)


class UpdateUserSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=255, required=False)
    password = serializers.CharField(
        write_only=True, required=False, trim_whitespace=False
    )
    name = serializers.CharField(max_length=100, required=False)
    age = serializers.IntegerField(min_value=0, max_value=MAX_AGE, required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError(
                "Provide at least one of: email, password, name, age."
            )
        return attrs


class UpdateResultSerializer(serializers.Serializer):
    affected = serializers.IntegerField()


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class LoginResponseSerializer(serializers.Serializer):
    accessToken = serializers.CharField(source="access_token")
