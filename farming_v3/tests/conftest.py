import pytest

from ..data import graph_client


@pytest.fixture(autouse=True)
def clean_clients():
    """Each test starts without default clients"""
    graph_client.reset_clients()
    yield
    graph_client.reset_clients()
