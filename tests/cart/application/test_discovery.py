"""Element discovery when the domain is initialized before anything else is imported."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[3] / "src"

SCRIPT = """
from marketplace.domain import marketplace

marketplace.init()

from protean.utils.globals import current_domain

from marketplace.cart.cart import Cart
from marketplace.purchase.purchase import Purchase

with marketplace.domain_context():
    print(type(current_domain.repository_for(Cart)).__name__)
    print(type(current_domain.repository_for(Purchase)).__name__)
print(",".join(sorted(name.rsplit(".", 1)[-1] for name in marketplace.registry.command_handlers)))
"""


@pytest.fixture(scope="module")
def discovered(tmp_path_factory):
    pythonpath = os.pathsep.join(filter(None, [str(SRC), os.environ.get("PYTHONPATH")]))
    env = {**os.environ, "PROTEAN_ENV": "test", "PYTHONPATH": pythonpath}
    result = subprocess.run(
        [sys.executable, "-c", SCRIPT],
        capture_output=True,
        text=True,
        env=env,
        cwd=tmp_path_factory.mktemp("discovery"),
        check=True,
    )
    return result.stdout.split()


def test_cart_repository_registered(discovered):
    assert discovered[0] == "CartRepository"


def test_purchase_repository_registered(discovered):
    assert discovered[1] == "PurchaseRepository"


def test_cart_and_checkout_handlers_registered(discovered):
    handlers = discovered[2].split(",")
    assert "ManageCartEntriesHandler" in handlers
    assert "CheckoutHandler" in handlers
