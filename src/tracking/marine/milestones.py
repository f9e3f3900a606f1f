"""Milestone correlation — picks the canonical events of each booking.

A booking accumulates many tracking events. Four of them matter to the
tracking page:

- Departure: ``vessel_depart_origin``, falling back to ``vessel_load_origin``.
- Arrival: ``vessel_arrive_destination``, falling back to
  ``vessel_discharge_destination``.
- Preparation: the ``export_drayage_arrive`` event.
- In transit: the latest event, by actual time, that is not one of the above.

Priority between fallback tags is fixed by tag, never by timestamp. Whenever
two events are otherwise equal, the one seen first in the input wins.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from tracking.marine.records import TrackingEvent

VESSEL_DEPART_ORIGIN = "vessel_depart_origin"
VESSEL_LOAD_ORIGIN = "vessel_load_origin"
VESSEL_ARRIVE_DESTINATION = "vessel_arrive_destination"
VESSEL_DISCHARGE_DESTINATION = "vessel_discharge_destination"
EXPORT_DRAYAGE_ARRIVE = "export_drayage_arrive"

# Ordered by preference
DEPARTURE_ACTION_TYPES = (VESSEL_DEPART_ORIGIN, VESSEL_LOAD_ORIGIN)
ARRIVAL_ACTION_TYPES = (VESSEL_ARRIVE_DESTINATION, VESSEL_DISCHARGE_DESTINATION)

MILESTONE_ACTION_TYPES = frozenset((*DEPARTURE_ACTION_TYPES, *ARRIVAL_ACTION_TYPES, EXPORT_DRAYAGE_ARRIVE))


@dataclass(frozen=True)
class Milestone:
    """Flattened view of the tracking event chosen for a milestone."""

    event_name: str | None = None
    location_name: str | None = None
    actual_time: datetime | None = None
    predicted_time: datetime | None = None
    carrier_planned_time: datetime | None = None
    last_processed_time: datetime | None = None

    @classmethod
    def from_event(cls, event: TrackingEvent) -> "Milestone":
        return cls(
            event_name=event.event_name,
            location_name=event.location_name,
            actual_time=event.actual_time,
            predicted_time=event.predicted_time,
            carrier_planned_time=event.carrier_planned_time,
            last_processed_time=event.last_processed_time,
        )


@dataclass(frozen=True)
class RecentActivity:
    preparation: Milestone | None = None
    in_transit: Milestone | None = None


@dataclass(frozen=True)
class BookingMilestones:
    """Correlated milestones of one booking.

    ``recent_activity`` is None when recent activity was not requested.
    """

    departure: Milestone | None = None
    arrival: Milestone | None = None
    recent_activity: RecentActivity | None = None


def _milestone(event: TrackingEvent | None) -> Milestone | None:
    return Milestone.from_event(event) if event is not None else None


def select_by_priority(events: Iterable[TrackingEvent], action_types: Sequence[str]) -> TrackingEvent | None:
    """Return the first event carrying the most preferred of ``action_types``."""
    best = None
    best_rank = len(action_types)
    for event in events:
        if event.action_type not in action_types:
            continue
        rank = action_types.index(event.action_type)
        if rank < best_rank:
            best, best_rank = event, rank
    return best


def select_departure(events: Iterable[TrackingEvent]) -> TrackingEvent | None:
    return select_by_priority(events, DEPARTURE_ACTION_TYPES)


def select_arrival(events: Iterable[TrackingEvent]) -> TrackingEvent | None:
    return select_by_priority(events, ARRIVAL_ACTION_TYPES)


def select_preparation(events: Iterable[TrackingEvent]) -> TrackingEvent | None:
    return next((event for event in events if event.action_type == EXPORT_DRAYAGE_ARRIVE), None)


def select_in_transit(events: Iterable[TrackingEvent]) -> TrackingEvent | None:
    """Latest non-milestone event that has actually happened."""
    latest = None
    for event in events:
        if event.action_type in MILESTONE_ACTION_TYPES or event.actual_time is None:
            continue
        # Strict comparison keeps the first of equally recent events
        if latest is None or event.actual_time > latest.actual_time:
            latest = event
    return latest


def correlate_booking(events: Sequence[TrackingEvent], include_recent_activity: bool = False) -> BookingMilestones:
    """Correlate the events of a single booking into its milestones."""
    recent_activity = None
    if include_recent_activity:
        recent_activity = RecentActivity(
            preparation=_milestone(select_preparation(events)),
            in_transit=_milestone(select_in_transit(events)),
        )

    return BookingMilestones(
        departure=_milestone(select_departure(events)),
        arrival=_milestone(select_arrival(events)),
        recent_activity=recent_activity,
    )


def group_by_booking(events: Iterable[TrackingEvent]) -> dict[str, list[TrackingEvent]]:
    """Bucket events per booking number, keeping input order inside each bucket."""
    grouped: dict[str, list[TrackingEvent]] = {}
    for event in events:
        grouped.setdefault(event.booking_number, []).append(event)
    return grouped


def correlate(
    events: Iterable[TrackingEvent],
    booking_numbers: Iterable[str],
    include_recent_activity: bool = False,
) -> dict[str, BookingMilestones]:
    """Correlate milestones for every booking in ``booking_numbers``.

    Bookings without any event still get an (empty) entry.
    """
    grouped = group_by_booking(events)
    return {
        booking_number: correlate_booking(grouped.get(booking_number, []), include_recent_activity)
        for booking_number in booking_numbers
    }
