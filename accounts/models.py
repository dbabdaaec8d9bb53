"""Database models for users, their one-time auth tokens and address book."""

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Manager for email-identified users."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email address must be set')
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', User.ROLE_ADMIN)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Custom user model.

    Logs in with ``email`` instead of a username and carries a ``role`` that
    separates shoppers from the back-office staff:

    - ``admin`` / ``shopmanager``: full catalog, purchasing and order admin
    - ``marketmanager``: blogs, testimonials and banners only
    - ``user``: storefront customer

    Reset and verification tokens are stored hashed; the raw token only ever
    travels by email.
    """

    ROLE_USER = 'user'
    ROLE_ADMIN = 'admin'
    ROLE_SHOP_MANAGER = 'shopmanager'
    ROLE_MARKET_MANAGER = 'marketmanager'

    ROLE_CHOICES = (
        (ROLE_USER, 'User'),
        (ROLE_ADMIN, 'Admin'),
        (ROLE_SHOP_MANAGER, 'Shop Manager'),
        (ROLE_MARKET_MANAGER, 'Market Manager'),
    )

    username = None
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)
    email_verified = models.BooleanField(default=False)

    password_reset_token = models.CharField(max_length=128, null=True, blank=True, db_index=True)
    password_reset_expires = models.DateTimeField(null=True, blank=True)
    email_verification_token = models.CharField(max_length=128, null=True, blank=True, db_index=True)
    email_verification_expires = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    objects = UserManager()

    def __str__(self):
        return self.email


class UserAddress(models.Model):
    """A shipping address in a customer's address book.

    A user has at most one default address; saving one with ``is_default``
    clears the flag on the others.
    """

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='addresses')
    address = models.CharField(max_length=500)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    zipcode = models.CharField(max_length=20)
    country = models.CharField(max_length=100, default='India')
    country_code = models.CharField(max_length=8, default='+91')
    mobile_number = models.CharField(max_length=20)
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-is_default', '-created_at', '-id']
        indexes = [models.Index(fields=['user', 'is_default'], name='useraddress_user_default_idx')]

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        if self.is_default:
            UserAddress.objects.filter(user_id=self.user_id, is_default=True).exclude(pk=self.pk).update(is_default=False)

    def __str__(self):
        return f'{self.address}, {self.city}'
