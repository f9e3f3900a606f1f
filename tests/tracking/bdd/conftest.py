"""Shared BDD fixtures and step definitions for marine tracking."""

from datetime import UTC, datetime

import pytest
from pytest_bdd import given, parsers, then, when
from tracking.marine.query import MarineTrackingsQuery, MarineTrackingsQueryHandler
from tracking.marine.records import TrackingEvent
from tracking.sources.fake_adapter import FakeTrackingSource


def _day(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=UTC)


@pytest.fixture()
def source():
    return FakeTrackingSource()


def _order(result, order_id):
    return next(order for order in result.marine_trackings if order.order_id == order_id)


def _booking(result, order_id, booking_number):
    return next(booking for booking in _order(result, order_id).bookings if booking.booking_number == booking_number)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('order "{order_id}" ships to "{ship_to_id}"'))
def order_ships_to(source, order_id, ship_to_id):
    source.order_ship_tos[order_id] = ship_to_id


@given(parsers.cfparse('booking "{booking_number}" of order "{order_id}" has a "{action_type}" event predicted for "{day}"'))
def predicted_event(source, booking_number, order_id, action_type, day):
    source.events.append(
        TrackingEvent(
            booking_number=booking_number,
            action_type=action_type,
            order_id=order_id,
            predicted_time=_day(day),
        )
    )


@given(
    parsers.cfparse('booking "{booking_number}" of order "{order_id}" has a "{action_type}" event that happened on "{day}"')
)
def actual_event(source, booking_number, order_id, action_type, day):
    source.events.append(
        TrackingEvent(
            booking_number=booking_number,
            action_type=action_type,
            order_id=order_id,
            actual_time=_day(day),
        )
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('marine trackings are requested for ship-to "{ship_to_id}"'), target_fixture="result")
def request_trackings(source, ship_to_id):
    return MarineTrackingsQueryHandler(source).handle(MarineTrackingsQuery(), [ship_to_id])


@when(
    parsers.cfparse('marine trackings with recent activity are requested for ship-to "{ship_to_id}"'),
    target_fixture="result",
)
def request_trackings_with_activity(source, ship_to_id):
    query = MarineTrackingsQuery(include_recent_activity=True)
    return MarineTrackingsQueryHandler(source).handle(query, [ship_to_id])


@when(
    parsers.cfparse('marine trackings for orders "{order_ids}" are requested for ship-to "{ship_to_id}"'),
    target_fixture="result",
)
def request_trackings_for_orders(source, order_ids, ship_to_id):
    query = MarineTrackingsQuery(order_ids=frozenset(order_ids.split(",")))
    return MarineTrackingsQueryHandler(source).handle(query, [ship_to_id])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('order "{order_id}" has earliest ETD "{day}"'))
def order_has_etd(result, order_id, day):
    assert _order(result, order_id).earliest_etd == _day(day)


@then(parsers.cfparse('order "{order_id}" has earliest ETA "{day}"'))
def order_has_eta(result, order_id, day):
    assert _order(result, order_id).earliest_eta == _day(day)


@then(parsers.cfparse('order "{order_id}" has {count:d} bookings'))
def order_has_bookings(result, order_id, count):
    assert len(_order(result, order_id).bookings) == count


@then(parsers.cfparse('only order "{order_id}" is listed'))
def only_order_listed(result, order_id):
    assert [order.order_id for order in result.marine_trackings] == [order_id]


@then(parsers.cfparse('booking "{booking_number}" of order "{order_id}" has no recent activity'))
def no_recent_activity(result, booking_number, order_id):
    assert _booking(result, order_id, booking_number).recent_activity is None


@then(parsers.cfparse('booking "{booking_number}" of order "{order_id}" is in transit since "{day}"'))
def in_transit_since(result, booking_number, order_id, day):
    activity = _booking(result, order_id, booking_number).recent_activity
    assert activity.in_transit.actual_time == _day(day)


@then("no orders are listed")
def no_orders(result):
    assert result.marine_trackings == ()
