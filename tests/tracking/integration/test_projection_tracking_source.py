"""Integration tests for the projection-backed tracking source."""

from datetime import UTC, datetime

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from tracking.marine.query import MarineTrackingsQuery, MarineTrackingsQueryHandler
from tracking.marine.records import ShipmentType
from tracking.projections.order_ship_to import OrderShipToView
from tracking.projections.shipments import ShipmentView
from tracking.projections.tracking_events import TrackingEventView
from tracking.sources.projection_adapter import ProjectionTrackingSource


def _assign(order_id, ship_to_id):
    current_domain.repository_for(OrderShipToView).add(OrderShipToView(order_id=order_id, ship_to_id=ship_to_id))


def _record_event(event_id, order_id, booking_number, action_type, **fields):
    current_domain.repository_for(TrackingEventView).add(
        TrackingEventView(
            event_id=event_id,
            order_id=order_id,
            booking_number=booking_number,
            action_type=action_type,
            **fields,
        )
    )


def _record_shipment(shipment_number, booking_number, shipment_type, **fields):
    current_domain.repository_for(ShipmentView).add(
        ShipmentView(
            shipment_number=shipment_number,
            booking_number=booking_number,
            shipment_type=shipment_type,
            **fields,
        )
    )


@pytest.fixture()
def source():
    return ProjectionTrackingSource()


class TestResolveAuthorizedOrders:
    def test_orders_of_authorized_ship_tos(self, source):
        _assign("SO-2", "ST-1")
        _assign("SO-1", "ST-1")
        _assign("SO-3", "ST-2")
        assert source.resolve_authorized_order_ids(["ST-1"]) == ["SO-1", "SO-2"]

    def test_requested_orders_are_intersected(self, source):
        _assign("SO-1", "ST-1")
        _assign("SO-3", "ST-2")
        assert source.resolve_authorized_order_ids(["ST-1"], ["SO-1", "SO-3"]) == ["SO-1"]

    def test_no_authorized_ship_tos(self, source):
        _assign("SO-1", "ST-1")
        assert source.resolve_authorized_order_ids([]) == []


class TestFetchTrackingEvents:
    def test_by_orders_in_identifier_order(self, source):
        _record_event("EV-2", "SO-1", "BKG-1", "vessel_depart_origin")
        _record_event("EV-1", "SO-1", "BKG-1", "vessel_load_origin")
        _record_event("EV-3", "SO-2", "BKG-2", "vessel_load_origin")

        events = source.fetch_tracking_events_by_orders(["SO-1"])
        assert [event.action_type for event in events] == ["vessel_load_origin", "vessel_depart_origin"]
        assert all(event.order_id == "SO-1" for event in events)

    def test_by_booking_numbers(self, source):
        _record_event(
            "EV-1",
            "SO-1",
            "BKG-1",
            "vessel_arrive_destination",
            event_name="Vessel arrived",
            location_name="Rotterdam, NL",
            predicted_time=datetime(2024, 2, 1, tzinfo=UTC),
        )
        _record_event("EV-2", "SO-2", "BKG-2", "vessel_load_origin")

        [event] = source.fetch_tracking_events_by_booking_numbers(["BKG-1"])
        assert event.event_name == "Vessel arrived"
        assert event.location_name == "Rotterdam, NL"
        assert event.predicted_time == datetime(2024, 2, 1, tzinfo=UTC)

    def test_empty_input_returns_empty(self, source):
        _record_event("EV-1", "SO-1", "BKG-1", "vessel_load_origin")
        assert source.fetch_tracking_events_by_orders([]) == []
        assert source.fetch_tracking_events_by_booking_numbers([]) == []

    def test_event_without_action_type_is_rejected(self, source):
        current_domain.repository_for(TrackingEventView).add(
            TrackingEventView(event_id="EV-1", order_id="SO-1", booking_number="BKG-1")
        )
        with pytest.raises(ValidationError) as exc:
            source.fetch_tracking_events_by_orders(["SO-1"])
        assert "action_type" in exc.value.messages

    def test_event_without_booking_number_is_rejected(self, source):
        current_domain.repository_for(TrackingEventView).add(
            TrackingEventView(event_id="EV-1", order_id="SO-1", action_type="vessel_load_origin")
        )
        with pytest.raises(ValidationError) as exc:
            source.fetch_tracking_events_by_orders(["SO-1"])
        assert "booking_number" in exc.value.messages


class TestFetchShipments:
    def test_filters_by_booking_and_type(self, source):
        _record_shipment("SH-1", "BKG-1", "Marine", vessel_name="MAERSK OHIO", voyage_number="412W")
        _record_shipment("SH-2", "BKG-1", "Truck30", container_id="MSKU1")
        _record_shipment("SH-3", "BKG-2", "Marine")

        [marine] = source.fetch_shipments_by_booking_and_type(["BKG-1"], ShipmentType.MARINE)
        assert marine.vessel_name == "MAERSK OHIO"
        assert marine.shipment_type == ShipmentType.MARINE

        [truck] = source.fetch_shipments_by_booking_and_type(["BKG-1"], ShipmentType.TRUCK_30)
        assert truck.container_id == "MSKU1"

    def test_queried_without_matches_returns_empty_list(self, source):
        _record_shipment("SH-1", "BKG-2", "Marine")
        assert source.fetch_shipments_by_booking_and_type(["BKG-1"], ShipmentType.MARINE) == []


class TestQueryOverProjections:
    def test_end_to_end(self, source):
        _assign("SO-1", "ST-1")
        _assign("SO-2", "ST-1")
        _record_event("EV-1", "SO-1", "BKG-1", "vessel_load_origin", predicted_time=datetime(2024, 1, 1, tzinfo=UTC))
        _record_event("EV-2", "SO-1", "BKG-1", "vessel_depart_origin", predicted_time=datetime(2024, 1, 9, tzinfo=UTC))
        _record_event("EV-3", "SO-1", "BKG-2", "vessel_load_origin", actual_time=datetime(2024, 1, 5, tzinfo=UTC))
        _record_shipment("SH-1", "BKG-1", "Marine", vessel_name="MAERSK OHIO")

        result = MarineTrackingsQueryHandler(source).handle(MarineTrackingsQuery(), ["ST-1"])

        so_1, so_2 = result.marine_trackings
        assert [booking.booking_number for booking in so_1.bookings] == ["BKG-1", "BKG-2"]
        assert so_1.bookings[0].departure.predicted_time == datetime(2024, 1, 9, tzinfo=UTC)
        assert so_1.earliest_etd == datetime(2024, 1, 5, tzinfo=UTC)
        assert so_1.bookings[0].marine_shipments[0].vessel_name == "MAERSK OHIO"
        assert so_1.bookings[1].marine_shipments == ()
        assert so_2.order_id == "SO-2"
        assert so_2.bookings == ()


class TestTimestampsWithoutOffset:
    def test_event_times_without_offset_are_utc(self, source):
        _record_event("EV-1", "SO-1", "BKG-1", "vessel_load_origin", actual_time=datetime(2024, 1, 1, 8, 30))

        [event] = source.fetch_tracking_events_by_orders(["SO-1"])
        assert event.actual_time == datetime(2024, 1, 1, 8, 30, tzinfo=UTC)
        assert event.actual_time.tzinfo is not None

    def test_shipment_times_without_offset_are_utc(self, source):
        _record_shipment("SH-1", "BKG-1", "Marine", planned_start=datetime(2024, 1, 3))

        [marine] = source.fetch_shipments_by_booking_and_type(["BKG-1"], ShipmentType.MARINE)
        assert marine.planned_start == datetime(2024, 1, 3, tzinfo=UTC)
        assert marine.planned_end is None

    def test_order_roll_up_over_mixed_offsets(self, source):
        _assign("SO-1", "ST-1")
        _record_event("EV-1", "SO-1", "BKG-1", "vessel_depart_origin", actual_time=datetime(2024, 1, 1))
        _record_event(
            "EV-2", "SO-1", "BKG-2", "vessel_depart_origin", actual_time=datetime(2024, 1, 2, tzinfo=UTC)
        )

        [order] = MarineTrackingsQueryHandler(source).handle(MarineTrackingsQuery(), ["ST-1"]).marine_trackings
        assert order.earliest_etd == datetime(2024, 1, 1, tzinfo=UTC)
