"""
API module for the REST implementation.
"""

from .rest_api import RosterRestAPI, install_error_handlers

__all__ = [
    "RosterRestAPI",
    "install_error_handlers",
]
