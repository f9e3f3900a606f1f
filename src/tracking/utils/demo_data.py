"""Demo data for local runs and load tests.

Loads a small, fixed set of ship-to assignments, tracking events and shipments
into the Tracking projections. Three ship-to locations own two orders each;
every order has one or two bookings at different stages of the voyage.
"""

from datetime import UTC, datetime, timedelta

from protean.domain import Domain

from tracking.projections.order_ship_to import OrderShipToView
from tracking.projections.shipments import ShipmentView
from tracking.projections.tracking_events import TrackingEventView

DEMO_SHIP_TO_IDS = ["ST-1001", "ST-1002", "ST-1003"]

# order_id -> (ship_to_id, [booking numbers])
DEMO_ORDERS = {
    "SO-500001": ("ST-1001", ["BKG-7001"]),
    "SO-500002": ("ST-1001", ["BKG-7002", "BKG-7003"]),
    "SO-500003": ("ST-1002", ["BKG-7004"]),
    "SO-500004": ("ST-1002", []),
    "SO-500005": ("ST-1003", ["BKG-7005"]),
    "SO-500006": ("ST-1003", ["BKG-7006", "BKG-7007"]),
}

_VOYAGE_BASE = datetime(2024, 3, 1, tzinfo=UTC)


def _voyage_events(order_id: str, booking_number: str, stage: int) -> list[TrackingEventView]:
    """Events of one booking, advanced ``stage`` steps along the voyage."""
    start = _VOYAGE_BASE + timedelta(days=stage * 3)
    steps = [
        ("export_drayage_arrive", "Container delivered to port", "Houston, TX", timedelta(days=0)),
        ("gate_in_origin", "Gate in at origin terminal", "Houston, TX", timedelta(days=1)),
        ("vessel_load_origin", "Loaded on vessel", "Houston, TX", timedelta(days=2)),
        ("vessel_depart_origin", "Vessel departed", "Houston, TX", timedelta(days=3)),
        ("vessel_arrive_transshipment", "Arrived at transshipment port", "Cartagena, CO", timedelta(days=9)),
        ("vessel_arrive_destination", "Vessel arrived", "Rotterdam, NL", timedelta(days=21)),
        ("vessel_discharge_destination", "Discharged from vessel", "Rotterdam, NL", timedelta(days=22)),
    ]

    events = []
    for index, (action_type, name, location, offset) in enumerate(steps):
        planned = start + offset
        happened = index < stage
        events.append(
            TrackingEventView(
                event_id=f"{booking_number}-{index:02d}",
                order_id=order_id,
                booking_number=booking_number,
                action_type=action_type,
                event_name=name,
                location_name=location,
                actual_time=planned if happened else None,
                predicted_time=None if happened else planned + timedelta(hours=12),
                carrier_planned_time=planned,
                last_processed_time=planned + timedelta(hours=1),
            )
        )
    return events


def _booking_shipments(booking_number: str, serial: int) -> list[ShipmentView]:
    sailing = _VOYAGE_BASE + timedelta(days=serial * 3)
    return [
        ShipmentView(
            shipment_number=f"SH-M-{booking_number}",
            booking_number=booking_number,
            shipment_type="Marine",
            executing_carrier_name="Maersk",
            vessel_name=f"MAERSK DEMO {serial}",
            voyage_number=f"{400 + serial}W",
            planned_start=sailing,
            planned_end=sailing + timedelta(days=21),
        ),
        ShipmentView(
            shipment_number=f"SH-T-{booking_number}",
            booking_number=booking_number,
            shipment_type="Truck30",
            container_id=f"MSKU{7000000 + serial}",
        ),
    ]


def seed_demo_data(domain: Domain) -> int:
    """Load the demo data set into the projections. Returns the number of rows added."""
    rows = []
    serial = 0
    for order_id, (ship_to_id, booking_numbers) in DEMO_ORDERS.items():
        rows.append(OrderShipToView(order_id=order_id, ship_to_id=ship_to_id))
        for booking_number in booking_numbers:
            serial += 1
            rows.extend(_voyage_events(order_id, booking_number, stage=serial % 7))
            rows.extend(_booking_shipments(booking_number, serial))

    with domain.domain_context():
        for row in rows:
            domain.repository_for(type(row)).add(row)

    return len(rows)
