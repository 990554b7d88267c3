"""
URL configuration for the devhub project.

Engagement endpoints take the target kind as a URL slug
(``projects``, ``snippets`` or ``community-posts``) followed by the target id.
"""
from django.urls import path

from engagement.views.interaction_views import toggle_like, toggle_save, record_view
from engagement.views.api_views import interactions_api

urlpatterns = [
    path('<slug:kind>/<uuid:entity_id>/like/', toggle_like, name='toggle_like'),
    path('<slug:kind>/<uuid:entity_id>/save/', toggle_save, name='toggle_save'),
    path('<slug:kind>/<uuid:entity_id>/view/', record_view, name='record_view'),
    path('api/<slug:kind>/<uuid:entity_id>/interactions/', interactions_api, name='interactions_api'),
]
