"""Without Firebase configuration every call is a no-op with an empty result."""

import pytest

from pos_firestoredb.schemas import DatabaseSeed, MenuItem, Order, SystemSettings, Table

from conftest import at

REPOSITORIES = [
    "menu",
    "categories",
    "orders",
    "tables",
    "zones",
    "inventory",
    "customers",
    "coupons",
    "bookings",
    "users",
    "roles",
]


def test_service_reports_not_configured(offline_service):
    assert not offline_service.is_firebase_configured()


@pytest.mark.parametrize("attribute", REPOSITORIES)
async def test_save_is_skipped(offline_service, attribute):
    response = await getattr(offline_service, attribute).save({"id": "x"})

    assert response.is_success
    assert response.skipped


@pytest.mark.parametrize("attribute", REPOSITORIES)
async def test_delete_is_skipped(offline_service, attribute):
    response = await getattr(offline_service, attribute).delete("x")

    assert response.skipped


@pytest.mark.parametrize("attribute", REPOSITORIES)
async def test_load_all_is_empty(offline_service, attribute):
    assert await getattr(offline_service, attribute).load_all() == []


def test_subscriptions_are_unavailable(offline_service):
    assert offline_service.subscribe_to_orders(lambda orders: None) is None
    assert offline_service.subscribe_to_tables(lambda tables: None) is None


async def test_order_save_is_skipped(offline_service):
    response = await offline_service.save_order(
        Order(id="A", items=[], total=0, status="pending", timestamp=at(10, 0))
    )

    assert response.skipped


async def test_settings_and_seed_are_skipped(offline_service):
    assert (await offline_service.save_settings(SystemSettings(restaurant_name="Pho"))).skipped
    assert await offline_service.load_settings() is None
    assert await offline_service.is_database_empty()

    seed = DatabaseSeed(
        settings=SystemSettings(restaurant_name="Pho"),
        menu=[MenuItem(id="m1", name="Pho", price=4.5)],
        tables=[Table(id="t1", name="T1", seats=2, status="free")],
    )
    assert (await offline_service.initialize_database(seed)).skipped
