"""JSON endpoint for the asset store.

One base path; the request method picks the action: GET lists, POST
creates, PUT updates and DELETE removes.
"""

import json
import logging
from functools import wraps

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import (
    HttpResponse,
    HttpResponseNotAllowed,
    HttpResponseNotModified,
    JsonResponse,
)
from django.views.decorators.csrf import csrf_exempt

from .models import Asset
from .records import to_record
from .services import store

logger = logging.getLogger(__name__)


class BadRequest(Exception):
    pass


def _error(message, status):
    return JsonResponse({"error": message}, status=status)


def _validation_message(exc):
    if hasattr(exc, "message_dict"):
        return "; ".join(
            f"{name}: {' '.join(messages)}"
            for name, messages in exc.message_dict.items()
        )
    return " ".join(exc.messages)


def _json_body(request):
    if not request.body:
        return {}
    try:
        return json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
        raise BadRequest("Invalid JSON")


def session_required(view):
    """Reject anonymous requests when ASSETS_API_REQUIRE_LOGIN is set."""

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if (
            getattr(settings, "ASSETS_API_REQUIRE_LOGIN", False)
            and not request.user.is_authenticated
        ):
            return _error("Authentication required", 401)
        return view(request, *args, **kwargs)

    return wrapper


def _list(request):
    etag = store.collection_etag()
    if request.headers.get("If-None-Match") == etag:
        response = HttpResponseNotModified()
    else:
        records = [to_record(asset) for asset in store.list_assets()]
        response = JsonResponse(records, safe=False)
    response["ETag"] = etag
    return response


def _create(request):
    asset = store.create_asset(_json_body(request))
    return JsonResponse(to_record(asset))


def _update(request):
    asset = store.update_asset(_json_body(request))
    return JsonResponse(to_record(asset))


def _delete(request):
    body = _json_body(request)
    if not isinstance(body, dict):
        raise BadRequest("Delete body must be a JSON object")
    store.delete_asset(body.get("id"))
    return HttpResponse("Deleted", content_type="text/plain")


ACTIONS = {
    "GET": _list,
    "POST": _create,
    "PUT": _update,
    "DELETE": _delete,
}


@csrf_exempt
@session_required
def asset_endpoint(request):
    """Dispatch an asset store action by request method.

    Every outcome is a structured response: 400 for malformed input,
    404 for an unknown id on update, 500 for a database fault.
    """
    action = ACTIONS.get(request.method)
    if action is None:
        response = HttpResponseNotAllowed(list(ACTIONS))
        response.content = b"Method Not Allowed"
        return response
    try:
        return action(request)
    except BadRequest as exc:
        return _error(str(exc), 400)
    except ValidationError as exc:
        return _error(_validation_message(exc), 400)
    except Asset.DoesNotExist:
        return _error("Asset not found", 404)
    except DatabaseError as exc:
        logger.exception("Database error during %s", request.method)
        return _error(str(exc), 500)
