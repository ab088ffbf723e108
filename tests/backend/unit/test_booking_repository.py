"""
Unit tests for services.bookings.BookingRepository.
Focus: every access to an existing booking is scoped to its owner.
"""
import asyncio
import datetime as dt

import pytest
import pytest_asyncio

from hotel_booking.errors import NotFoundError
from hotel_booking.models.booking import Booking
from hotel_booking.services import BookingRepository

pytestmark = pytest.mark.asyncio

JAN_1 = dt.date(2025, 1, 1)
JAN_3 = dt.date(2025, 1, 3)


@pytest.fixture
def repo():
    return BookingRepository()


@pytest_asyncio.fixture
async def owners(create_user):
    u1, _ = await create_user()
    u2, _ = await create_user()
    return u1, u2


async def test_create_returns_persisted_row(db, repo, owners):
    u1, _ = owners
    booking = await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    assert booking.booking_id is not None
    assert booking.user_id == u1.user_id
    assert booking.created_time is not None
    assert booking.updated_time is not None
    assert await Booking.filter(booking_id=booking.booking_id).exists()


async def test_list_by_owner_returns_only_own_bookings(db, repo, owners):
    u1, u2 = owners
    mine = {(await repo.create(u1.user_id, h, JAN_1, JAN_3)).booking_id for h in (1, 2, 3)}
    await repo.create(u2.user_id, 9, JAN_1, JAN_3)

    listed = await repo.list_by_owner(u1.user_id)
    assert {b.booking_id for b in listed} == mine
    assert all(b.user_id == u1.user_id for b in listed)


async def test_list_by_owner_empty_for_user_without_bookings(db, repo, owners):
    _, u2 = owners
    assert await repo.list_by_owner(u2.user_id) == []


async def test_update_if_owned_changes_fields_and_bumps_timestamp(db, repo, owners):
    u1, _ = owners
    booking = await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    await asyncio.sleep(0.01)
    updated = await repo.update_if_owned(booking.booking_id, u1.user_id, 2, JAN_3, dt.date(2025, 1, 5))
    assert updated.hotel_id == 2
    assert updated.start_date == JAN_3
    assert updated.end_date == dt.date(2025, 1, 5)
    assert updated.user_id == u1.user_id
    assert updated.updated_time > booking.updated_time
    assert updated.created_time == booking.created_time


async def test_update_by_other_user_is_not_found_and_leaves_row(db, repo, owners):
    u1, u2 = owners
    booking = await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    with pytest.raises(NotFoundError):
        await repo.update_if_owned(booking.booking_id, u2.user_id, 5, JAN_1, JAN_3)
    row = await Booking.get(booking_id=booking.booking_id)
    assert row.hotel_id == 1
    assert row.user_id == u1.user_id


async def test_delete_by_other_user_is_not_found_and_keeps_row(db, repo, owners):
    u1, u2 = owners
    booking = await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    with pytest.raises(NotFoundError):
        await repo.delete_if_owned(booking.booking_id, u2.user_id)
    assert await Booking.filter(booking_id=booking.booking_id).exists()


async def test_missing_and_foreign_bookings_raise_the_same_error(db, repo, owners):
    u1, u2 = owners
    booking = await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    with pytest.raises(NotFoundError) as foreign:
        await repo.get_if_owned(booking.booking_id, u2.user_id)
    with pytest.raises(NotFoundError) as missing:
        await repo.get_if_owned(booking.booking_id + 100, u2.user_id)
    assert foreign.value.to_dict() == missing.value.to_dict()


async def test_delete_if_owned_removes_row(db, repo, owners):
    u1, _ = owners
    booking = await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    await repo.delete_if_owned(booking.booking_id, u1.user_id)
    assert await repo.list_by_owner(u1.user_id) == []
    with pytest.raises(NotFoundError):
        await repo.delete_if_owned(booking.booking_id, u1.user_id)


async def test_concurrent_creates_all_persist(db, repo, owners):
    u1, _ = owners
    created = await asyncio.gather(*(repo.create(u1.user_id, i, JAN_1, JAN_3) for i in range(10)))
    assert len({b.booking_id for b in created}) == 10
    assert len(await repo.list_by_owner(u1.user_id)) == 10


async def test_create_for_missing_owner_is_not_found(db, repo, owners):
    u1, _ = owners
    await u1.delete()
    with pytest.raises(NotFoundError) as exc_info:
        await repo.create(u1.user_id, 1, JAN_1, JAN_3)
    assert exc_info.value.message == "User not found"
    assert await Booking.all().count() == 0


@pytest.mark.parametrize("booking_id", [0, -1, 2**31, 10**20])
async def test_unstorable_ids_are_not_found(db, repo, owners, booking_id):
    u1, _ = owners
    with pytest.raises(NotFoundError):
        await repo.get_if_owned(booking_id, u1.user_id)
    with pytest.raises(NotFoundError):
        await repo.update_if_owned(booking_id, u1.user_id, 1, JAN_1, JAN_3)
    with pytest.raises(NotFoundError):
        await repo.delete_if_owned(booking_id, u1.user_id)
