"""Pytest configuration and fixtures for query filters tests."""

import pytest
import pandas as pd

from query_filters import DefaultTemplate, FilterSession, MemoryQueryParams


@pytest.fixture
def order_defaults():
    """Default values of the orders filter template."""
    return {
        "name": "",
        "age": 0,
        "is_paid": False,
        "statuses": set(),
    }


@pytest.fixture
def order_template(order_defaults):
    """Orders filter template."""
    return DefaultTemplate(order_defaults)


@pytest.fixture
def session(order_template):
    """Fresh session with every filter at its default."""
    return FilterSession(order_template)


@pytest.fixture
def params():
    """Empty in-memory query parameters."""
    return MemoryQueryParams()


class FakeStreamlitQueryParams:
    """Stand-in for st.query_params outside a running Streamlit app."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})
        self.from_dict_calls = 0

    def get(self, key, default=None):
        return self._data.get(key, default)

    def __getitem__(self, key):
        return self._data[key]

    def __setitem__(self, key, value):
        self._data[key] = str(value)

    def __delitem__(self, key):
        del self._data[key]

    def __contains__(self, key):
        return key in self._data

    def to_dict(self):
        return dict(self._data)

    def from_dict(self, params):
        self.from_dict_calls += 1
        self._data = {k: str(v) for k, v in params.items()}


@pytest.fixture
def fake_query_params():
    """Fake st.query_params with one unrelated parameter."""
    return FakeStreamlitQueryParams({"page": "2"})


@pytest.fixture
def sample_orders():
    """Sample orders DataFrame."""
    return pd.DataFrame({
        "order_id": [1001, 1002, 1003, 1004, 1005, 1006],
        "name": ["Alice", "Bob", "Carol", "Dave", "Alicia", "Bob"],
        "age": [34, 28, 34, 45, 22, 28],
        "is_paid": [True, False, True, True, False, True],
        "status": ["completed", "canceled", "delivered", "completed", "canceled", "delivered"],
    })


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Drop cached YAML configuration between tests."""
    from config.config_loader import clear_config_cache as _clear

    _clear()
    yield
    _clear()
