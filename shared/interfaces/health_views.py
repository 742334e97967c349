"""
Health check views.

Liveness only proves the process answers. Readiness also requires the
database to be reachable and every registered model table to be migrated.
"""
import logging

from django.apps import apps
from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class LivenessCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe - database reachable and schema migrated."""
    permission_classes = [AllowAny]

    app_labels = ('catalog',)

    def get(self, request):
        try:
            missing = self.missing_tables()
        except DatabaseError as e:
            logger.error("Readiness check could not reach the database: %s", e)
            return Response(
                {'status': 'not_ready', 'database': {'healthy': False, 'error': str(e)}},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        if missing:
            logger.warning("Readiness check found unmigrated tables: %s", ', '.join(missing))

        return Response(
            {
                'status': 'not_ready' if missing else 'ready',
                'database': {'healthy': True},
                'schema': {'healthy': not missing, 'missing_tables': missing},
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE if missing else status.HTTP_200_OK,
        )

    def missing_tables(self):
        """Tables of the watched apps that the database does not have yet."""
        existing = set(connection.introspection.table_names())
        expected = [
            model._meta.db_table
            for label in self.app_labels
            for model in apps.get_app_config(label).get_models()
        ]
        return sorted(table for table in expected if table not in existing)
