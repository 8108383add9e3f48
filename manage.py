#!/usr/bin/env python
"""
Django management utility for CourseHub.

Runs the development server, migrations and other administrative
tasks. Development settings are the default; set
DJANGO_SETTINGS_MODULE=config.settings.prod for production.
"""
import os
import sys


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django is not installed or not available on the PYTHONPATH."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
