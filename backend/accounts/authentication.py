import logging

from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)

ADMIN_CLAIM = "is_admin"


def issue_admin_token(user) -> str:
    """Sign an HS256 access token asserting ``is_admin: true`` for ``user``."""
    token = AccessToken.for_user(user)
    token[ADMIN_CLAIM] = True
    return str(token)


class AdminJWTAuthentication(JWTAuthentication):
    """
    Authenticate admin requests from a bearer header or the admin token cookie.

    A broken bearer token is an error. A stale cookie is ignored so that public
    pages keep working for a signed-out browser.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is not None:
            raw_token = self.get_raw_token(header)
            if raw_token is None:
                return None
            validated_token = self.get_validated_token(raw_token)
        else:
            raw_token = request.COOKIES.get(settings.ADMIN_TOKEN_COOKIE)
            if not raw_token:
                return None
            try:
                validated_token = self.get_validated_token(raw_token)
            except InvalidToken:
                logger.debug("Ignoring invalid admin cookie token.")
                return None

        if validated_token.get(ADMIN_CLAIM) is not True:
            raise AuthenticationFailed("Token does not grant admin access.")
        return self.get_user(validated_token), validated_token
