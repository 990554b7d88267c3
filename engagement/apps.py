from django.apps import AppConfig

class EngagementConfig(AppConfig):
    """Django app config for likes, saves and views."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'engagement'
