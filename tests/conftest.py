import os

import pytest

os.environ.setdefault("TEST_MODE", "1")


@pytest.fixture
def cat_sentence():
    return "The cat sat on the mat"
