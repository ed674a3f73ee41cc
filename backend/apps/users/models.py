from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.core.validators import MinValueValidator
from django.db import models


class Address(models.Model):
    # Leaf record; only ever created for, and deleted with, its owning user.
    country = models.CharField(max_length=100)
    city = models.CharField(max_length=100)
    street = models.CharField(max_length=150)
    zip_code = models.CharField(max_length=20, db_column='zipCode')

    class Meta:
        db_table = 'address_korean'

    def __str__(self):
        return f"{self.street}, {self.city} {self.zip_code}, {self.country}"


class User(AbstractBaseUser):
    # id, password and last_login are inherited
    email = models.EmailField(max_length=255, unique=True)
    name = models.CharField(max_length=100)
    age = models.PositiveIntegerField(validators=[MinValueValidator(0)])
    # The user row holds the foreign key; the address cannot be removed while owned.
    address = models.OneToOneField(
        Address,
        on_delete=models.PROTECT,
        related_name='user',
    )

    objects = BaseUserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name', 'age']

    class Meta:
        db_table = 'users'

    def __str__(self):
        return self.email
