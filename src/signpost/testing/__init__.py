"""Test utilities for signpost applications.

::

    from signpost.testing import TestClient
"""

from signpost.testing.client import TestClient

__all__ = ["TestClient"]
