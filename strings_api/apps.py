from django.apps import AppConfig


class StringsApiConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'strings_api'
    verbose_name = 'String Analyzer'
