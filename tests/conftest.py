import itertools

import pytest

from product_api.config import Settings
from product_api.server import create_app
from product_api.store import SAMPLE_PRODUCTS, ProductStore


API_KEY = "test-key"


@pytest.fixture
def id_generator():
    counter = itertools.count(100)
    return lambda: f"p-{next(counter)}"


@pytest.fixture
def store(id_generator):
    store = ProductStore(id_generator=id_generator)
    store.load(SAMPLE_PRODUCTS)
    return store


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, env="production", seed_sample_products=False)


@pytest.fixture
def app(settings, store):
    app = create_app(settings, store)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"x-api-key": API_KEY}


@pytest.fixture
def valid_payload():
    return {
        "name": "  Desk Lamp ",
        "description": " LED lamp with dimmer ",
        "price": 35.5,
        "category": " Home ",
        "inStock": True,
    }
