"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database, errors),
``repositories`` (SQL per table), ``services`` (business rules),
``schemas`` (wire models) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
