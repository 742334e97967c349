"""
Root URL configuration.
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

from shared.interfaces.health_views import (
    HealthCheckView,
    LivenessCheckView,
    ReadinessCheckView,
)

urlpatterns = [
    path('api/', include('apps.catalog.interfaces.api.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),

    # Probes
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
]
