"""Who owns a cart, wishlist or order placed through the storefront."""

import uuid

from django.conf import settings


def user_owner_key(user):
    return f'user:{user.pk}'


def _valid_session_id(value):
    try:
        return str(uuid.UUID(value))
    except (TypeError, ValueError):
        return None


class OwnerKeyMixin:
    """Resolves ``self.owner_key`` for the current request.

    Signed-in users own their rows by user id. Guests are identified by the
    ``cart_session_id`` cookie; a fresh UUID is issued when it is missing or
    malformed and the cookie is (re)set on every response so it keeps sliding.
    """

    _session_id = None

    @property
    def owner_key(self):
        user = self.request.user
        if user and user.is_authenticated:
            return user_owner_key(user)
        if self._session_id is None:
            cookie = self.request.COOKIES.get(settings.CART_SESSION_COOKIE)
            self._session_id = _valid_session_id(cookie) or str(uuid.uuid4())
        return self._session_id

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        if self._session_id is not None:
            response.set_cookie(
                settings.CART_SESSION_COOKIE,
                self._session_id,
                max_age=settings.CART_SESSION_MAX_AGE,
                httponly=True,
                secure=not settings.DEBUG,
                samesite='Lax',
            )
        return response
