"""URL routes for the auth APIs."""

from django.urls import path

from . import views

urlpatterns = [
    path('signup/', views.signup, name='auth_signup'),
    path('login/', views.login, name='auth_login'),
    path('logout/', views.logout, name='auth_logout'),
    path('me/', views.me, name='auth_me'),
    path('forgot-password/', views.forgot_password, name='auth_forgot_password'),
    path('reset-password/', views.reset_password, name='auth_reset_password'),
    path('verify-email/', views.verify_email, name='auth_verify_email'),
    path('change-password/', views.change_password, name='auth_change_password'),
]
