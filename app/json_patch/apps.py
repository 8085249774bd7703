from django.apps import AppConfig


class JsonPatchConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "json_patch"
    verbose_name = "JSON Patch schemas"
