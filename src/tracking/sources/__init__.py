"""Tracking source abstraction — pluggable access to tracking data."""

import os

from tracking.sources.port import TrackingSource

_source_instance: TrackingSource | None = None


def get_source() -> TrackingSource:
    """Return the configured tracking source (singleton).

    Reads the Tracking projections by default. Select another adapter via the
    TRACKING_SOURCE environment variable.
    """
    global _source_instance
    if _source_instance is None:
        adapter = os.environ.get("TRACKING_SOURCE", "projection")
        if adapter == "projection":
            from tracking.sources.projection_adapter import ProjectionTrackingSource

            _source_instance = ProjectionTrackingSource()
        elif adapter == "fake":
            from tracking.sources.fake_adapter import FakeTrackingSource

            _source_instance = FakeTrackingSource()
        else:
            raise ValueError(f"Unknown tracking source: {adapter}")
    return _source_instance


def set_source(source: TrackingSource) -> None:
    """Override the active tracking source (useful for tests)."""
    global _source_instance
    _source_instance = source


def reset_source() -> None:
    """Reset the tracking source singleton."""
    global _source_instance
    _source_instance = None
