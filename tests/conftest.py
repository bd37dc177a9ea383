import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tintline.overrides import reset_override
from tintline.supports import clear_probe_cache


@pytest.fixture(autouse=True)
def clean_override_state():
    """Each test starts and ends with no overrides and an empty probe cache."""
    reset_override()
    clear_probe_cache()
    yield
    reset_override()
    clear_probe_cache()
