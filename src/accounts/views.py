"""Session endpoint for the shared login gate."""

import json
import logging

from django.contrib.auth import authenticate, login, logout
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid username or password"


def _is_credential(value):
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _session_state(request):
    user = request.user
    return {
        "authenticated": user.is_authenticated,
        "username": user.get_username() if user.is_authenticated else "",
    }


@csrf_exempt
def session(request):
    """GET reports, POST logs in, DELETE logs out."""
    if request.method == "GET":
        return JsonResponse(_session_state(request))

    if request.method == "DELETE":
        logout(request)
        return JsonResponse(_session_state(request))

    if request.method != "POST":
        return JsonResponse({"error": "Method Not Allowed"}, status=405)

    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, ValueError):
        return JsonResponse({"error": "Invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    username = data.get("username")
    password = data.get("password")
    if not (_is_credential(username) and _is_credential(password)):
        return JsonResponse({"error": INVALID_LOGIN}, status=401)

    user = authenticate(request, username=username, password=password)
    if user is None:
        logger.info("Rejected login for %r", username)
        return JsonResponse({"error": INVALID_LOGIN}, status=401)
    login(request, user)
    return JsonResponse(_session_state(request))
