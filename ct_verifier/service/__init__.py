"""
CT Verification Service

This package exposes certificate inclusion verification over a local REST API.
"""

from .server import create_app, run_server

__all__ = ["create_app", "run_server"]
