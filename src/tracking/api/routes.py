"""FastAPI routes for the Tracking domain.

Thin adapters that translate HTTP requests into the marine trackings query.
The caller's authorized ship-to locations travel in the ``X-Ship-To-Ids``
header, set by the gateway that authenticated the caller.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Header, Query

from tracking.api.schemas import (
    BookingResponse,
    MarineShipmentResponse,
    MarineTrackingsResponse,
    MilestoneResponse,
    OrderTrackingResponse,
    RecentActivityResponse,
    TruckShipmentResponse,
)
from tracking.marine.aggregation import BookingView, OrderView
from tracking.marine.milestones import Milestone
from tracking.marine.query import MarineTrackingsQuery, MarineTrackingsQueryHandler
from tracking.utils.logging import add_context

router = APIRouter(prefix="/marine-trackings", tags=["marine-trackings"])


def authorized_ship_to_ids(x_ship_to_ids: str = Header(default="")) -> frozenset[str]:
    """Parse the comma-separated authorized ship-to locations of the caller."""
    return frozenset(value.strip() for value in x_ship_to_ids.split(",") if value.strip())


def _milestone(milestone: Milestone | None) -> MilestoneResponse | None:
    return MilestoneResponse(**asdict(milestone)) if milestone is not None else None


def _booking(view: BookingView) -> BookingResponse:
    fields = {
        "booking_number": view.booking_number,
        "earliest_etd": view.earliest_etd,
        "earliest_eta": view.earliest_eta,
        "marine_shipments": (
            None
            if view.marine_shipments is None
            else [MarineShipmentResponse(**asdict(shipment)) for shipment in view.marine_shipments]
        ),
        "truck_shipments": (
            None
            if view.truck_shipments is None
            else [TruckShipmentResponse(**asdict(shipment)) for shipment in view.truck_shipments]
        ),
        "departure": _milestone(view.departure),
        "arrival": _milestone(view.arrival),
    }
    if view.recent_activity is not None:
        fields["recent_activity"] = RecentActivityResponse(
            preparation=_milestone(view.recent_activity.preparation),
            in_transit=_milestone(view.recent_activity.in_transit),
        )
    return BookingResponse(**fields)


def _order(view: OrderView) -> OrderTrackingResponse:
    return OrderTrackingResponse(
        order_id=view.order_id,
        earliest_etd=view.earliest_etd,
        earliest_eta=view.earliest_eta,
        bookings=[_booking(booking) for booking in view.bookings],
    )


@router.get("", response_model=MarineTrackingsResponse, response_model_exclude_unset=True)
async def get_marine_trackings(
    order_id: list[str] | None = Query(default=None),
    include_recent_activity: bool = False,
    ship_to_ids: frozenset[str] = Depends(authorized_ship_to_ids),
) -> MarineTrackingsResponse:
    """Consolidated marine tracking of the caller's orders."""
    add_context(ship_to_count=len(ship_to_ids), requested_order_count=len(order_id or []))
    query = MarineTrackingsQuery(
        order_ids=frozenset(order_id) if order_id else None,
        include_recent_activity=include_recent_activity,
    )
    result = MarineTrackingsQueryHandler().handle(query, ship_to_ids)
    return MarineTrackingsResponse(marine_trackings=[_order(view) for view in result.marine_trackings])
