"""
Top‑level package for the Simple Health Data Server.

The server lives in ``health_data_api.app``; ``health_data_api.client``
is a small ``requests`` based client for it and ``health_data_api.run``
starts the server under uvicorn.
"""

__all__ = []
