from django.apps import AppConfig


class ShareItConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "shareit"
    verbose_name = "ShareIt"
