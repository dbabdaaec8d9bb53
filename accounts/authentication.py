"""JWT authentication that also understands the http-only ``token`` cookie."""

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken


class CookieJWTAuthentication(JWTAuthentication):
    """Bearer header first, then the auth cookie set by the login endpoint.

    A bad header token is rejected with 401. A stale cookie is ignored so that
    public pages keep working after the token expires.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is not None:
            return super().authenticate(request)

        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return None

        try:
            validated_token = self.get_validated_token(raw_token.encode('utf-8'))
            return self.get_user(validated_token), validated_token
        except InvalidToken:
            return None
