"""Representative time of a milestone."""

from datetime import datetime

from tracking.marine.milestones import Milestone


def coalesce_time(milestone: Milestone | None) -> datetime | None:
    """Actual time if known, else predicted, else the carrier's plan."""
    if milestone is None:
        return None

    for candidate in (milestone.actual_time, milestone.predicted_time, milestone.carrier_planned_time):
        if candidate is not None:
            return candidate
    return None


def earliest(times) -> datetime | None:
    """Earliest of the given times, ignoring missing ones."""
    present = [time for time in times if time is not None]
    return min(present) if present else None
