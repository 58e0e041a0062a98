from django.apps import AppConfig


class ContentsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contents'
    verbose_name = "内容"

    def ready(self):
        from contents.infrastructure.factory import register_entity_models
        register_entity_models()
