from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from core.exceptions import Conflict

User = get_user_model()


class AdminLoginSerializer(serializers.Serializer):
    """Check an admin's email + password and expose the matching user."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)

    def validate(self, attrs):
        email = attrs["email"].strip().lower()
        user = User.objects.admins().filter(email__iexact=email).first()
        if user is None or not user.check_password(attrs["password"]):
            raise AuthenticationFailed("Invalid email or password.")
        attrs["user"] = user
        return attrs


class AdminUserSerializer(serializers.ModelSerializer):
    """Expose admin accounts without their password hash."""

    name = serializers.CharField(min_length=2, max_length=120)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, max_length=100)

    class Meta:
        model = User
        fields = ["id", "name", "email", "password", "date_joined", "last_login"]
        read_only_fields = ["id", "date_joined", "last_login"]

    def validate_email(self, value: str) -> str:
        email = value.strip().lower()
        taken = User.objects.filter(email__iexact=email)
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise Conflict("User with this email already exists.")
        return email

    def validate_name(self, value: str) -> str:
        return value.strip()

    def create(self, validated_data):
        return User.objects.create_admin(
            email=validated_data["email"],
            password=validated_data["password"],
            name=validated_data["name"],
        )

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        email = validated_data.pop("email", None)
        if "name" in validated_data:
            instance.name = validated_data["name"]
        if email:
            instance.email = email
            instance.username = email
        if password:
            instance.set_password(password)
        instance.save()
        return instance


class PasswordChangeSerializer(serializers.Serializer):
    """Validate and update the signed-in admin's password."""

    old_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True, min_length=6, max_length=100)

    def validate_old_password(self, value):
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Current password is incorrect.")
        return value

    def validate(self, attrs):
        if attrs["old_password"] == attrs["new_password"]:
            raise serializers.ValidationError(
                {"new_password": "New password must differ from the current password."}
            )
        return attrs

    def save(self, **kwargs):
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        user.save(update_fields=["password"])
        return user
