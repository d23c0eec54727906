import pytest

from vfspath.core.models import Config
from vfspath.utils import PathUtils


@pytest.fixture
def path_utils():
    """Path operations using the default slash separator."""
    return PathUtils(Config(separator="/"))


@pytest.fixture
def colon_utils():
    """Path operations using ':' as separator."""
    return PathUtils(Config(separator=":"))
