import os

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures", "alert-classes")


def read_fixture(file_name: str) -> str:
    with open(os.path.join(FIXTURES_DIR, file_name), "r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def read():
    return read_fixture
