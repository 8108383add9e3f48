"""Development settings for CourseHub.

Extends base settings with local defaults: debug pages, a fallback
secret key and verbose application logging.
"""
from .base import *  # noqa
import os


DEBUG = True
ALLOWED_HOSTS = ["127.0.0.1", "localhost"]

# Development secret key fallback (safe only for local use)
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-insecure-key-change-me")

# Static files are served by runserver; WhiteNoise is added in prod
LOGGING["loggers"]["coursehub"]["level"] = os.environ.get("LOG_LEVEL", "DEBUG").upper()
