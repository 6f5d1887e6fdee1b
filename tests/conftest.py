import pytest

from observable_collection import ObservableCollection


@pytest.fixture
def letters():
    """Collection holding ``a``..``d`` in order."""
    return ObservableCollection(["a", "b", "c", "d"])
