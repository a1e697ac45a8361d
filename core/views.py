"""
Core views for health checks and metrics exposition.
"""

from django.apps import apps
from django.http import HttpResponse, JsonResponse
from django.views import View
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest


class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status."""
        engine = apps.get_app_config("licenses").engine
        if engine is None:
            return JsonResponse(
                {"status": "unhealthy", "service": "player-license-service"},
                status=503,
            )
        return JsonResponse({"status": "healthy", "service": "player-license-service"})


class MetricsView(View):
    """Prometheus metrics endpoint."""

    def get(self, _request):
        """Return metrics in the Prometheus text format."""
        return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
