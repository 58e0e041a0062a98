from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'
    verbose_name = "账户"

    def ready(self):
        from accounts.infrastructure.factory import register_entity_models
        register_entity_models()
