"""Shared fixtures for the generic stack tests."""

import pytest

from generic_stack import app as web
from generic_stack.stack_playground import StackPlayground


@pytest.fixture
def playground() -> StackPlayground:
    return StackPlayground()


@pytest.fixture
def client():
    web.app.config["TESTING"] = True
    web.playground.reset()
    with web.app.test_client() as client:
        yield client
    web.playground.reset()
