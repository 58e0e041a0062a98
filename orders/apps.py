from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'orders'
    verbose_name = "订单"

    def ready(self):
        from orders.infrastructure.factory import register_entity_models
        register_entity_models()
