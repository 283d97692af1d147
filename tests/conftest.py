import logging

import pytest


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop the stderr handler that `leakscan.cli` installs so it does not
    outlive the captured stream of the test that created it."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
