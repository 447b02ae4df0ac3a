"""Vrishti Bandhan - agricultural waste exchange backend.

Farmers post waste listings, companies browse them and are notified by
email whenever a new listing is posted.
"""

__version__ = "0.1.0"

from vrishti.infrastructure.api.app import app

__all__ = ["app", "__version__"]
