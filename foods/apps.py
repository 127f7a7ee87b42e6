from django.apps import AppConfig


class FoodsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'foods'
    verbose_name = 'Food products'

    def ready(self):
        from . import signals  # noqa: F401
