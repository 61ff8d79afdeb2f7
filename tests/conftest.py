"""Shared test fixtures."""

import pytest

from wgraph.event import _registrars
from wgraph.models.location import Location
from wgraph.models.vertex import Vertex


@pytest.fixture(autouse=True)
def clear_registrars():
    """Make sure no event handler leaks between tests."""
    _registrars.clear()
    yield
    _registrars.clear()


@pytest.fixture
def v5():
    return Vertex(key=5)


@pytest.fixture
def v7():
    return Vertex(key=7)


@pytest.fixture
def v9():
    return Vertex(key=9)


@pytest.fixture
def depot():
    return Location(x=32.1, y=35.2, z=0.0)


@pytest.fixture
def annotated(depot):
    """A vertex with every scalar field set."""
    return Vertex(key=5, tag=2, info="x", weight=1.5, location=depot)
