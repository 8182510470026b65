from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.db import models

from crm.errors import DocumentNotFound


class UserManager(DjangoUserManager):
    def get_user(self, pk):
        user = self.filter(pk=pk).first() if str(pk).isdigit() else None

        if user is None:
            raise DocumentNotFound("User not found")

        return user


class User(AbstractUser):
    # Owners pass every permission check
    is_owner = models.BooleanField(default=False)

    objects = UserManager()

    def __str__(self):
        return self.get_full_name() or self.username
