"""Application tests for browsing, filtering and seller statistics."""

import pytest
from marketplace.catalogue.listing import categories, get_product, list_products, seller_summary
from protean.exceptions import ObjectNotFoundError


@pytest.fixture()
def catalogue(make_user, make_product):
    sarah = make_user(username="sarah")
    tom = make_user(username="tom")
    return {
        "sarah": sarah,
        "tom": tom,
        "bike": make_product(seller=sarah, title="Mountain Bike", category="Sports", price=320.0),
        "lamp": make_product(seller=sarah, title="Desk Lamp", category="Home & Garden", price=25.0),
        "racket": make_product(seller=tom, title="Tennis Racket", category="Sports", price=40.0),
    }


class TestListProducts:
    def test_no_filters_returns_everything(self, catalogue):
        assert len(list(list_products())) == 3

    def test_empty_strings_are_not_filters(self, catalogue):
        assert len(list(list_products(category="", search=""))) == 3

    def test_category_filter(self, catalogue):
        titles = {p.title for p in list_products(category="Sports")}
        assert titles == {"Mountain Bike", "Tennis Racket"}

    def test_search_is_case_insensitive_substring(self, catalogue):
        titles = [p.title for p in list_products(search="bIKe")]
        assert titles == ["Mountain Bike"]

    def test_filters_combine(self, catalogue):
        assert [p.title for p in list_products(category="Sports", search="racket")] == ["Tennis Racket"]
        assert list(list_products(category="Home & Garden", search="racket")) == []

    def test_seller_filter(self, catalogue):
        titles = {p.title for p in list_products(seller_id=catalogue["sarah"].id)}
        assert titles == {"Mountain Bike", "Desk Lamp"}

    def test_newest_first(self, catalogue):
        assert [p.title for p in list_products()][0] == "Tennis Racket"

    def test_listing_is_restartable_and_sees_new_products(self, catalogue, make_product):
        listing = list_products(category="Sports")
        assert len(list(listing)) == 2

        make_product(seller=catalogue["tom"], title="Football", category="Sports", price=12.0)
        assert len(list(listing)) == 3


class TestGetProduct:
    def test_get_existing(self, catalogue):
        assert get_product(catalogue["bike"].id).title == "Mountain Bike"

    def test_get_missing(self):
        with pytest.raises(ObjectNotFoundError):
            get_product("missing-product")


def test_seller_summary(catalogue):
    summary = seller_summary(catalogue["sarah"].id)
    assert summary == {"count": 2, "total_value": 345.0, "average_price": 172.5}


def test_seller_summary_without_listings(make_user):
    assert seller_summary(make_user().id) == {"count": 0, "total_value": 0.0, "average_price": 0.0}


def test_categories():
    assert "Home & Garden" in categories()
    assert len(categories()) == 9
