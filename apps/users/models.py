from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _


class User(AbstractUser):
    class Roles(models.TextChoices):
        ADMIN = "admin", _("Admin")
        OPERATOR = "operator", _("Operator")

    role = models.CharField(max_length=32, choices=Roles.choices, default=Roles.ADMIN)

    class Meta:
        db_table = 'admins'
        verbose_name = 'admin user'
        verbose_name_plural = 'admin users'

    def __str__(self):
        return self.username
