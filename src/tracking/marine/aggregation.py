"""Booking and order roll-up of marine tracking.

Everything here is a pure function of already-fetched collections: no I/O,
no clocks, no shared state. Given the same inputs it always produces the same
views.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from tracking.marine.milestones import BookingMilestones, Milestone, RecentActivity, correlate
from tracking.marine.records import TrackingEvent
from tracking.marine.shipments import (
    BookingShipments,
    MarineShipmentSummary,
    ShipmentCollection,
    TruckShipmentSummary,
    join_shipments,
)
from tracking.marine.timing import coalesce_time, earliest


@dataclass(frozen=True)
class BookingView:
    booking_number: str
    departure: Milestone | None = None
    arrival: Milestone | None = None
    recent_activity: RecentActivity | None = None
    marine_shipments: tuple[MarineShipmentSummary, ...] | None = ()
    truck_shipments: tuple[TruckShipmentSummary, ...] | None = ()
    earliest_etd: datetime | None = None
    earliest_eta: datetime | None = None


@dataclass(frozen=True)
class OrderView:
    order_id: str
    earliest_etd: datetime | None = None
    earliest_eta: datetime | None = None
    bookings: tuple[BookingView, ...] = ()


def distinct_booking_numbers(events: Iterable[TrackingEvent]) -> list[str]:
    """Booking numbers in first-seen order, without repeats."""
    return list(dict.fromkeys(event.booking_number for event in events))


def bookings_by_order(events: Iterable[TrackingEvent]) -> dict[str, list[str]]:
    """Map each order to its distinct booking numbers, in first-seen order."""
    mapping: dict[str, dict[str, None]] = {}
    for event in events:
        if event.order_id is None:
            continue
        mapping.setdefault(event.order_id, {})[event.booking_number] = None
    return {order_id: list(bookings) for order_id, bookings in mapping.items()}


def build_booking_view(
    booking_number: str,
    milestones: BookingMilestones,
    shipments: BookingShipments,
) -> BookingView:
    return BookingView(
        booking_number=booking_number,
        departure=milestones.departure,
        arrival=milestones.arrival,
        recent_activity=milestones.recent_activity,
        marine_shipments=shipments.marine,
        truck_shipments=shipments.truck,
        earliest_etd=coalesce_time(milestones.departure),
        earliest_eta=coalesce_time(milestones.arrival),
    )


def build_booking_views(
    booking_numbers: Sequence[str],
    milestones: Mapping[str, BookingMilestones],
    shipments: Mapping[str, BookingShipments],
) -> dict[str, BookingView]:
    """Merge correlated milestones and joined shipments per booking."""
    return {
        booking_number: build_booking_view(
            booking_number,
            milestones.get(booking_number, BookingMilestones()),
            shipments.get(booking_number, BookingShipments()),
        )
        for booking_number in booking_numbers
    }


def build_order_view(order_id: str, bookings: Sequence[BookingView]) -> OrderView:
    return OrderView(
        order_id=order_id,
        earliest_etd=earliest(booking.earliest_etd for booking in bookings),
        earliest_eta=earliest(booking.earliest_eta for booking in bookings),
        bookings=tuple(bookings),
    )


def build_order_views(
    order_ids: Iterable[str],
    order_bookings: Mapping[str, Sequence[str]],
    booking_views: Mapping[str, BookingView],
) -> list[OrderView]:
    """One view per order, in the order the order IDs were given.

    Orders without bookings are kept, with no bookings and no roll-up times.
    """
    return [
        build_order_view(
            order_id,
            [
                booking_views[booking_number]
                for booking_number in order_bookings.get(order_id, [])
                if booking_number in booking_views
            ],
        )
        for order_id in order_ids
    ]


def aggregate_marine_trackings(
    order_ids: Sequence[str],
    order_events: Sequence[TrackingEvent],
    booking_events: Sequence[TrackingEvent],
    marine_shipments: ShipmentCollection,
    truck_shipments: ShipmentCollection,
    include_recent_activity: bool = False,
) -> list[OrderView]:
    """Roll tracking events and shipments up to one view per order.

    ``order_events`` are the events fetched for ``order_ids``; they fix which
    bookings belong to which order. ``booking_events`` are all events of
    those bookings and drive milestone selection.
    """
    booking_numbers = distinct_booking_numbers(order_events)

    milestones = correlate(booking_events, booking_numbers, include_recent_activity)
    shipments = join_shipments(booking_numbers, marine_shipments, truck_shipments)
    booking_views = build_booking_views(booking_numbers, milestones, shipments)

    return build_order_views(order_ids, bookings_by_order(order_events), booking_views)
