"""Small viewset mixins shared by the admin resources."""

from django.http import Http404
from rest_framework.exceptions import NotFound
from rest_framework.response import Response


class AdminResourceMixin:
    """Storefront-style messages for the admin CRUD endpoints.

    - a missing object answers ``{"error": not_found_message}`` with 404
    - a delete answers ``{"message": delete_message}`` with 200
    """

    not_found_message = 'Not found'
    delete_message = 'Deleted'

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({'message': self.delete_message})
