from .interaction_views import toggle_like, toggle_save, record_view
from .api_views import interactions_api

__all__ = [
    "toggle_like",
    "toggle_save",
    "record_view",
    "interactions_api",
]
