"""Projection-backed tracking source.

Reads order ship-to assignments, tracking events and shipments from the
Tracking domain's projections. Rows are returned ordered by their identifier
so that downstream tie-breaks see a stable input order. Timestamps stored
without an offset are read as UTC.

This is also the boundary where feed rows are checked: a tracking event
without a booking number or an action type cannot be correlated and is
rejected here instead of being silently skipped downstream.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from tracking.domain import logger
from tracking.marine.records import ShipmentRecord, ShipmentType, TrackingEvent
from tracking.projections.order_ship_to import OrderShipToView
from tracking.projections.shipments import ShipmentView
from tracking.projections.tracking_events import TrackingEventView
from tracking.sources.port import TrackingSource

PAGE_SIZE = 500


def _fetch_all(queryset) -> list:
    """Drain a queryset page by page."""
    items = []
    offset = 0
    while True:
        page = queryset.offset(offset).limit(PAGE_SIZE).all()
        items.extend(page.items)
        if not page.has_next:
            return items
        offset += PAGE_SIZE


def _as_utc(value: datetime | None) -> datetime | None:
    """Feed timestamps without an offset are UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def _to_tracking_event(row: TrackingEventView) -> TrackingEvent:
    errors = {}
    if not row.booking_number:
        errors["booking_number"] = [f"Tracking event {row.event_id} has no booking number"]
    if not row.action_type:
        errors["action_type"] = [f"Tracking event {row.event_id} has no action type"]
    if errors:
        raise ValidationError(errors)

    return TrackingEvent(
        booking_number=row.booking_number,
        action_type=row.action_type,
        order_id=str(row.order_id),
        event_name=row.event_name,
        location_name=row.location_name,
        actual_time=_as_utc(row.actual_time),
        predicted_time=_as_utc(row.predicted_time),
        carrier_planned_time=_as_utc(row.carrier_planned_time),
        last_processed_time=_as_utc(row.last_processed_time),
    )


def _to_shipment_record(row: ShipmentView) -> ShipmentRecord:
    return ShipmentRecord(
        booking_number=row.booking_number,
        shipment_type=ShipmentType(row.shipment_type),
        shipment_number=str(row.shipment_number),
        container_id=row.container_id,
        executing_carrier_name=row.executing_carrier_name,
        vessel_name=row.vessel_name,
        voyage_number=row.voyage_number,
        planned_start=_as_utc(row.planned_start),
        planned_end=_as_utc(row.planned_end),
        actual_start=_as_utc(row.actual_start),
        actual_end=_as_utc(row.actual_end),
    )


class ProjectionTrackingSource(TrackingSource):
    """Tracking source over the Tracking domain projections."""

    def resolve_authorized_order_ids(
        self,
        authorized_ship_to_ids: Iterable[str],
        requested_order_ids: Iterable[str] | None = None,
    ) -> list[str]:
        authorized = list(dict.fromkeys(authorized_ship_to_ids))
        if not authorized:
            return []

        query = current_domain.repository_for(OrderShipToView)._dao.query.filter(ship_to_id__in=authorized)
        requested = list(dict.fromkeys(requested_order_ids or []))
        if requested:
            query = query.filter(order_id__in=requested)

        order_ids = [str(row.order_id) for row in _fetch_all(query.order_by("order_id"))]
        logger.debug(
            "Resolved authorized orders",
            ship_to_count=len(authorized),
            requested_count=len(requested),
            order_count=len(order_ids),
        )
        return order_ids

    def fetch_tracking_events_by_orders(self, order_ids: Iterable[str]) -> list[TrackingEvent]:
        order_ids = list(dict.fromkeys(order_ids))
        if not order_ids:
            return []

        query = current_domain.repository_for(TrackingEventView)._dao.query.filter(order_id__in=order_ids)
        return [_to_tracking_event(row) for row in _fetch_all(query.order_by("event_id"))]

    def fetch_tracking_events_by_booking_numbers(self, booking_numbers: Iterable[str]) -> list[TrackingEvent]:
        booking_numbers = list(dict.fromkeys(booking_numbers))
        if not booking_numbers:
            return []

        query = current_domain.repository_for(TrackingEventView)._dao.query.filter(
            booking_number__in=booking_numbers
        )
        return [_to_tracking_event(row) for row in _fetch_all(query.order_by("event_id"))]

    def fetch_shipments_by_booking_and_type(
        self,
        booking_numbers: Iterable[str],
        shipment_type: ShipmentType,
    ) -> list[ShipmentRecord] | None:
        booking_numbers = list(dict.fromkeys(booking_numbers))
        if not booking_numbers:
            return []

        query = current_domain.repository_for(ShipmentView)._dao.query.filter(
            booking_number__in=booking_numbers,
            shipment_type=shipment_type.value,
        )
        return [_to_shipment_record(row) for row in _fetch_all(query.order_by("shipment_number"))]
