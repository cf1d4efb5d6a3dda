from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models


class AdminUserManager(UserManager):
    def admins(self):
        return self.filter(is_staff=True, is_active=True)

    def create_admin(self, *, email: str, password: str, name: str = ""):
        email = email.strip().lower()
        return self.create_user(
            username=email,
            email=email,
            password=password,
            name=name.strip(),
            is_staff=True,
        )


class User(AbstractUser):
    """Back-office account. Admins are staff users whose username is their email."""

    name = models.CharField(max_length=120, blank=True)

    objects = AdminUserManager()

    def __str__(self):
        return self.name or self.email or self.username
