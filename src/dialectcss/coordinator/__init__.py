from dialectcss.coordinator.coordinator import Coordinator, CoordinatorState
from dialectcss.coordinator.timers import TimerSlot

__all__ = ["Coordinator", "CoordinatorState", "TimerSlot"]
