from django.apps import AppConfig


class UserAccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.user_accounts'
    label = 'user_accounts'
    verbose_name = 'User Accounts'
