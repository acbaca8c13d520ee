from datetime import datetime

import pytest

from storefront.services.catalog import CatalogService


@pytest.fixture
def catalog(session):
    return CatalogService(session)

def add(catalog, name, category="women"):
    return catalog.add(name=name, image="http://img/x.png", category=category,
                       new_price=50.0, old_price=80.5)


def test_identifiers_are_sequential_and_not_reused(catalog):
    assert add(catalog, "first").id == 1
    assert add(catalog, "second").id == 2

    catalog.remove(1)

    assert add(catalog, "third").id == 3
    assert [p.id for p in catalog.list_products()] == [2, 3]

def test_remove_absent_product_is_a_noop(catalog):
    add(catalog, "first")
    catalog.remove(42)
    assert len(catalog.list_products()) == 1

def test_new_product_defaults(catalog, session):
    add(catalog, "first")
    session.expire_all()

    product = catalog.list_products()[0]
    assert product.available is True
    assert isinstance(product.date, datetime)
    assert product.date.year >= 2024

def test_filter_by_category(catalog):
    add(catalog, "dress", "women")
    add(catalog, "shirt", "men")
    add(catalog, "skirt", "women")

    assert [p.name for p in catalog.filter_by_category("women")] == ["dress", "skirt"]
    assert catalog.filter_by_category("kid") == []

def test_new_collections_skips_first_and_keeps_last_eight(catalog):
    for i in range(12):
        add(catalog, f"p{i + 1}")

    assert [p.id for p in catalog.new_collections()] == [5, 6, 7, 8, 9, 10, 11, 12]

def test_new_collections_on_small_catalog(catalog):
    add(catalog, "only")
    assert catalog.new_collections() == []

def test_popular_in_takes_first_four_of_category(catalog):
    for i in range(6):
        add(catalog, f"w{i}", "women")
    add(catalog, "m0", "men")

    assert [p.name for p in catalog.popular_in("women")] == ["w0", "w1", "w2", "w3"]

def test_deleting_newest_product_frees_its_id(catalog):
    add(catalog, "first")
    add(catalog, "second")

    catalog.remove(2)

    assert add(catalog, "third").id == 2
