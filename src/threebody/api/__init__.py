"""HTTP transport layer for threebody.

Pydantic models and FastAPI routes over :class:`ThreeBodyService`; the
physics lives elsewhere.

``create_app()`` imports FastAPI lazily so that ``import threebody.api``
works without the ``api`` extra installed.
"""


def create_app(cors_origins=None):
    """Build the FastAPI application (deferred import)."""
    from threebody.api.app import create_app as _create_app

    return _create_app(cors_origins=cors_origins)
