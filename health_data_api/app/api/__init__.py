"""
API package.

``router`` in ``api.router`` collects every endpoint module under
``api/endpoints``; ``api.deps`` holds the dependencies they share.
"""
