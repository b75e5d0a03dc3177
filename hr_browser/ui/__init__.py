"""
UI adapters for the browser.

Provides a Dash-based web UI via create_dash_app(), with a small REST surface
mounted on the same Flask server under /api.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
