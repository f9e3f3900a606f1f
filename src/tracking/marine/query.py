"""Marine trackings query — consolidated tracking status of the caller's orders.

Resolves the orders the caller may see from their authorized ship-to
locations, fetches tracking events and shipments through the tracking source,
and hands the collections to the aggregation.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from tracking.domain import logger
from tracking.marine.aggregation import OrderView, aggregate_marine_trackings, distinct_booking_numbers
from tracking.marine.records import ShipmentType
from tracking.sources import get_source
from tracking.sources.port import TrackingSource


@dataclass(frozen=True)
class MarineTrackingsQuery:
    """Request for marine tracking.

    ``order_ids`` narrows the result to specific orders; None or empty means
    every authorized order.
    """

    order_ids: frozenset[str] | None = None
    include_recent_activity: bool = False


@dataclass(frozen=True)
class MarineTrackingsResult:
    marine_trackings: tuple[OrderView, ...] = ()


class MarineTrackingsQueryHandler:
    def __init__(self, source: TrackingSource | None = None) -> None:
        self.source = source if source is not None else get_source()

    def handle(self, query: MarineTrackingsQuery, authorized_ship_to_ids: Iterable[str]) -> MarineTrackingsResult:
        order_ids = self.source.resolve_authorized_order_ids(authorized_ship_to_ids, query.order_ids)

        order_events = self.source.fetch_tracking_events_by_orders(order_ids)
        if not order_events:
            logger.info("No tracking events for authorized orders", order_count=len(order_ids))
            return MarineTrackingsResult()

        booking_numbers = distinct_booking_numbers(order_events)
        marine_shipments = self.source.fetch_shipments_by_booking_and_type(booking_numbers, ShipmentType.MARINE)
        truck_shipments = self.source.fetch_shipments_by_booking_and_type(booking_numbers, ShipmentType.TRUCK_30)
        booking_events = self.source.fetch_tracking_events_by_booking_numbers(booking_numbers)

        order_views = aggregate_marine_trackings(
            order_ids,
            order_events,
            booking_events,
            marine_shipments,
            truck_shipments,
            include_recent_activity=query.include_recent_activity,
        )

        logger.info(
            "Marine trackings aggregated",
            order_count=len(order_views),
            booking_count=len(booking_numbers),
            event_count=len(booking_events),
            include_recent_activity=query.include_recent_activity,
        )
        return MarineTrackingsResult(marine_trackings=tuple(order_views))
