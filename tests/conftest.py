import pytest
from fastapi.testclient import TestClient

from allmyrecipes.app.api.deps import get_ocr_engine
from allmyrecipes.app.core.config import get_settings
from allmyrecipes.app.main import create_app


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def fake_ocr_engine(image):
    return f"page {image.size[0]}x{image.size[1]}", {"confidence": 80.0, "duration_ms": 1}


@pytest.fixture
def app():
    app = create_app()
    app.dependency_overrides[get_ocr_engine] = lambda: fake_ocr_engine
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
