import random

import pytest
from fastapi.testclient import TestClient

from classcode.core.registry import QuestionRegistry
from classcode.main import create_app


@pytest.fixture
def registry():
    return QuestionRegistry(rng=random.Random(1234))


@pytest.fixture
def client(registry):
    app = create_app(registry=registry)
    with TestClient(app) as c:
        yield c
