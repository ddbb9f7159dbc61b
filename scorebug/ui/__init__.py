"""
UI package for the indoor hockey scoreboard overlay.

This package contains the Flask server used by the operator panel and
the overlay renderer.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
