import pytest

from urikit.uri.components import ComponentStore
from urikit.uri.parser import parse


@pytest.fixture
def empty_store() -> ComponentStore:
    """Fixture providing a store with every slot absent."""
    return ComponentStore()


@pytest.fixture
def full_store() -> ComponentStore:
    """Fixture providing a store parsed from a URI with every component."""
    return parse("http://user@host:80/path?q#f")
