"""Project-level views for the asset tracker."""

from django.db import DatabaseError, connection
from django.http import JsonResponse


def health_check(request):
    """Health check endpoint for monitoring and load balancers."""
    db_ok = True
    try:
        connection.ensure_connection()
    except DatabaseError:
        db_ok = False

    return JsonResponse(
        {"status": "ok" if db_ok else "degraded", "db": db_ok},
        status=200 if db_ok else 503,
    )
