"""Fixtures shared by the example tests.

Every example directory holds an ``app.py`` defining ``app``. The file
is executed again for each test, so each test starts from an app that
has not been frozen yet.
"""

import runpy
from pathlib import Path

import pytest

from signpost.testing import TestClient


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """The ``app`` object from the ``app.py`` beside the requesting test."""
    namespace = runpy.run_path(str(Path(request.path).parent / "app.py"))
    return namespace["app"]


@pytest.fixture
async def example_client(example_app):
    async with TestClient(example_app) as client:
        yield client
