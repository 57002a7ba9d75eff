import time
from collections import Counter

from registrar.core.events import EventType, RegistryEvent
from registrar.observability.hooks import RegistryObserver


class MetricsCollector(RegistryObserver):
    """Counts registry events by type."""

    def __init__(self):
        self.start_time = time.time()
        self.counts = Counter()
        self.removed_children = 0

    def record(self, event: RegistryEvent):
        self.counts[event.type] += 1
        if event.type is EventType.REMOVE and event.child is not None:
            self.removed_children += 1

    def collect(self):
        metrics = {
            "duration_sec": round(time.time() - self.start_time, 2)
        }

        for event_type in EventType:
            metrics[event_type.value.lower()] = self.counts[event_type]

        # REMOVE for an absent key carries no child
        metrics["live_children"] = self.counts[EventType.CREATE] - self.removed_children

        return metrics
