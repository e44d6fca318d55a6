"""
FastAPI dependencies shared by the endpoints.

The user directory is owned by the application instance (stored on
``app.state`` by ``create_app``) and handed to route handlers through
``get_directory``.  Tests can therefore build independent
applications, each with its own directory.
"""

from fastapi import Request

from health_data_api.app.services.user_service import UserDirectory


def get_directory(request: Request) -> UserDirectory:
    """Return the directory attached to the running application."""
    return request.app.state.directory
