import pytest
from sqlalchemy.engine import URL

from financial.db import is_in_memory


@pytest.mark.parametrize(
    "url",
    [
        "sqlite://",
        "sqlite:///:memory:",
        "sqlite+pysqlite:///:memory:",
        URL.create("sqlite+pysqlite", database=":memory:"),
    ],
)
def test_in_memory_urls(url):
    assert is_in_memory(url)


@pytest.mark.parametrize(
    "url",
    [
        "sqlite:///./data/financial.db",
        "postgresql+psycopg://app:pw@db/financial",
    ],
)
def test_file_and_server_urls(url):
    assert not is_in_memory(url)
