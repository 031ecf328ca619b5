"""Test utilities for cowl applications::

    from cowl.testing import TestClient
"""

from cowl.testing.client import TestClient

__all__ = ["TestClient"]
