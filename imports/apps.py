"""Defines the configuration for the Imports app."""

from django.apps import AppConfig


class ImportsConfig(AppConfig):
    """Configuration class for the CSV import app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "imports"
