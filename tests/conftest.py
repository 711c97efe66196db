import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def _marketplace_domain(request):
    """Initialize the marketplace domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from marketplace.domain import marketplace

    marketplace.init()
    return marketplace


@pytest.fixture(scope="session", autouse=True)
def setup_db(_marketplace_domain):
    from marketplace.utils.db import drop_db, setup_db

    setup_db(_marketplace_domain)

    yield

    drop_db(_marketplace_domain)


@pytest.fixture(autouse=True)
def object_store():
    """Keep uploaded images in memory for the duration of a test."""
    from marketplace.catalogue.storage import InMemoryObjectStore, reset_object_store, set_object_store

    store = InMemoryObjectStore()
    set_object_store(store)

    yield store

    reset_object_store()


@pytest.fixture(autouse=True)
def run_around_tests(_marketplace_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _marketplace_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_user():
    from marketplace.identity.registration import register

    counter = {"n": 0}

    def _make(email=None, password="s3cret", username=None):
        counter["n"] += 1
        n = counter["n"]
        return register(
            email=email or f"user{n}@example.com",
            password=password,
            username=username or f"user{n}",
        )

    return _make


@pytest.fixture()
def make_product(make_user):
    from marketplace.catalogue.creation import create_product

    def _make(seller=None, title="Mountain Bike", category="Sports", price=320.0, description=None, **kwargs):
        seller = seller or make_user()
        return create_product(
            title=title,
            description=description,
            category=category,
            price=price,
            seller_id=seller.id,
            **kwargs,
        )

    return _make


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def client(_marketplace_domain):
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from marketplace.api import install_error_handlers, install_request_context
    from marketplace.cart.api import cart_router
    from marketplace.catalogue.api import product_router
    from marketplace.identity.api import auth_router, user_router
    from marketplace.purchase.api import purchase_router

    app = FastAPI()
    install_request_context(app, _marketplace_domain)
    install_error_handlers(app)
    for router in (auth_router, user_router, product_router, cart_router, purchase_router):
        app.include_router(router)
    return TestClient(app)


@pytest.fixture()
def signup(client):
    """Register and log in through the API; returns (user, auth headers)."""

    def _signup(email="alice@example.com", password="s3cret", username="alice"):
        client.post("/api/auth/register", json={"email": email, "password": password, "username": username})
        response = client.post("/api/auth/login", json={"email": email, "password": password})
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _signup


@pytest.fixture()
def listing(client, signup):
    """List products as sarah through the API; returns their ids."""
    _, headers = signup(email="sarah@example.com", username="sarah")

    def _list(title="Mountain Bike", category="Sports", price="320"):
        response = client.post(
            "/api/products",
            data={"title": title, "category": category, "price": price},
            headers=headers,
        )
        return response.json()["id"]

    return _list


@pytest.fixture()
def buyer(signup):
    return signup(email="alice@example.com", username="alice")
