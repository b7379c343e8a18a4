"""
WSGI config for the asset tracker project.

Run ``manage.py migrate`` once before starting the server; the schema
is not provisioned per request.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tracker.settings")

application = get_wsgi_application()
