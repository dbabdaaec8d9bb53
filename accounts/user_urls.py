"""URL routes for the signed-in customer's profile and address book."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter()
router.include_root_view = False
router.register(r'addresses', views.UserAddressViewSet, basename='user-address')

urlpatterns = [
    path('profile/', views.profile, name='user_profile'),
    path('update-profile/', views.profile, name='user_update_profile'),
    path('default-address/', views.default_address, name='user_default_address'),
    path('', include(router.urls)),
]
