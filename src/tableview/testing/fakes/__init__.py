"""Testing fakes – in-memory collaborators."""
from tableview.testing.fakes.layout import RecordingLayoutService

__all__ = ["RecordingLayoutService"]
