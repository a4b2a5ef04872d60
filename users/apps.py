from django.apps import AppConfig


class UsersConfig(AppConfig):
    """
    Configuration for the users app.

    Accounts live in the configured auth service (Cognito in deployed
    environments, Django's own user table otherwise); this app only
    provisions accounts and ends sessions.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "users"
