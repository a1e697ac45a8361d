"""
WSGI config for PlayerLicenseService.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "PlayerLicenseService.settings.prod")

application = get_wsgi_application()
