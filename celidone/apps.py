from django.apps import AppConfig


class CelidoneConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "celidone"
    verbose_name = "Celidone - Cadastro de Clientes"
