from voicelive.state import RelayState

from .bridge import RelayBridge
from .session import RelaySession
from .events import EVENT_POLICY, EventAction, classify_event

__all__ = ["EVENT_POLICY", "EventAction", "RelayBridge", "RelaySession", "RelayState", "classify_event"]
