"""
Top‑level package for the Meetup API.

This file makes ``meetup_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``meetup_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
