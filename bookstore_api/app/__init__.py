"""
Application package initializer.

The project is organised into layers: ``core`` holds configuration,
database access, logging and error translation; ``repositories`` maps
rows of the ``book`` table to ``Book`` records; ``services`` owns the
business rules; ``schemas`` defines request and response bodies; and
``api/v1`` exposes the HTTP routes.
"""

from .main import app  # noqa: F401
