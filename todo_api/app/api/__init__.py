"""
API package containing the HTTP routes.

``router.py`` exposes a single ``router`` that includes every
domain-specific router from ``endpoints``.
"""
