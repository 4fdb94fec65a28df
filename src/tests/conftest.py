import logging

import pytest


@pytest.fixture(scope="session", autouse=True)
def setup():
    logging.basicConfig(filename="test.log", level=logging.INFO)
