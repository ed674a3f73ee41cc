from django.apps import AppConfig


class AuthConfig(AppConfig):
    name = 'apps.auth'
    label = 'userhub_auth'  # "auth" belongs to django.contrib.auth
    verbose_name = 'Credentials'
