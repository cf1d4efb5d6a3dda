import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from rest_framework import status, viewsets
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import issue_admin_token
from .permissions import IsAdmin, is_admin_request
from .serializers import AdminLoginSerializer, AdminUserSerializer, PasswordChangeSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


def _set_admin_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.ADMIN_TOKEN_COOKIE,
        token,
        max_age=settings.ADMIN_TOKEN_LIFETIME_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.ADMIN_TOKEN_COOKIE_SECURE,
        samesite="Strict",
        path="/",
    )


class AdminLoginView(APIView):
    """Exchange admin email + password for a signed admin token."""

    permission_classes = [AllowAny]
    authentication_classes = []

    def get_authenticate_header(self, request):
        # Without an authenticator DRF would downgrade bad credentials to 403.
        return 'Bearer realm="api"'

    def post(self, request, *args, **kwargs):
        serializer = AdminLoginSerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except AuthenticationFailed:
            logger.info("Rejected admin login for %s", request.data.get("email"))
            raise
        user = serializer.validated_data["user"]
        update_last_login(None, user)
        token = issue_admin_token(user)
        response = Response(
            {
                "token": token,
                "admin": {"name": user.name, "email": user.email},
            }
        )
        _set_admin_cookie(response, token)
        return response


class LogoutView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        response = Response({"authenticated": False})
        response.delete_cookie(settings.ADMIN_TOKEN_COOKIE, path="/", samesite="Strict")
        return response


class AuthCheckView(APIView):
    """Tell the back office whether the caller holds a valid admin token."""

    permission_classes = [AllowAny]

    def perform_authentication(self, request):
        # Deferred to get() so a bad token answers "false" instead of 401.
        pass

    def get(self, request, *args, **kwargs):
        try:
            authenticated = is_admin_request(request)
        except AuthenticationFailed:
            authenticated = False
        return Response({"authenticated": authenticated})


class PasswordView(APIView):
    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAdmin()]

    def get(self, request, *args, **kwargs):
        return Response({"exists": User.objects.admins().exists()})

    def post(self, request, *args, **kwargs):
        serializer = PasswordChangeSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"message": "Password updated."})


class AdminInitView(APIView):
    """Create the very first admin. Closed once any admin exists."""

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        if User.objects.admins().exists():
            raise PermissionDenied("Admin users already exist. Please use the login page.")
        serializer = AdminUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Initial admin %s created", user.email)
        return Response(
            {
                "user": AdminUserSerializer(user).data,
                "message": "First admin user created successfully. You can now log in.",
            },
            status=status.HTTP_201_CREATED,
        )


class AdminUserViewSet(viewsets.ModelViewSet):
    serializer_class = AdminUserSerializer
    permission_classes = [IsAdmin]
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return User.objects.admins().order_by("-date_joined", "-id")

    def get_permissions(self):
        # The user list stays readable while no admin exists so the UI can offer setup.
        if self.action == "list" and not User.objects.admins().exists():
            return [AllowAny()]
        return super().get_permissions()

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({"users": serializer.data})

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response({"user": self.get_serializer(user).data}, status=status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        return Response({"user": self.get_serializer(self.get_object()).data})

    def update(self, request, *args, **kwargs):
        # PUT behaves like PATCH: omitted fields keep their value.
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response({"user": self.get_serializer(user).data})

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({"message": "User deleted successfully."})
