"""
Application package initializer.

This package contains the application factory and all of its
submodules.  Configuration, logging and database access live in
``core``; request and response models in ``schemas``; SQL in
``services``; and HTTP wiring in ``api``.

The application is not instantiated at import time because it needs
a bind address and a database URL from the environment.  Build it
with ``create_app`` or serve it with ``run.py``.
"""

from .main import create_app  # noqa: F401
