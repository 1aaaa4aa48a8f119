from .event_helper import EventHistory
from .stage_helper import AlternatingDoubleStage, FaultyStage

__all__ = ("AlternatingDoubleStage", "EventHistory", "FaultyStage")
