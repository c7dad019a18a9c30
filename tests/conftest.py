import logging

import pytest
from unittest.mock import patch


# pytest tweaks logging such that our debug logs go to stderr, which is then
# spammy under --capture=no. Turn default logging back down.
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def debug_env():
    """
    Sets ``MVNARGS_DEBUG`` for the duration of the fixtured test.
    """
    with patch.dict("os.environ", {"MVNARGS_DEBUG": "1"}):
        yield
