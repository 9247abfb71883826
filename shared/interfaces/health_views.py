"""
Health check views.
"""
from django.db import connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthCheckView(APIView):
    """Health check endpoint, including a database round trip."""
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
        except Exception as e:
            return Response(
                {'status': 'unhealthy', 'database': str(e)},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)
