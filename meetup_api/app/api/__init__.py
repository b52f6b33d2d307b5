"""
API package containing the HTTP routes.

The top‑level ``router`` in ``router.py`` aggregates the endpoint
modules in ``endpoints``; ``errors.py`` maps service errors to
status codes and the JSON envelope.
"""
