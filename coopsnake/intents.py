from typing import Dict, Optional

from .entities import Intent


class IntentChannel:
    """One mailbox slot per snake holding its latest target declaration.

    Snakes run one after the other, so whoever moves first in a tick reads the
    other's intent from the previous tick and the second mover reads a fresh one.
    """

    def __init__(self):
        self._slots: Dict[int, Intent] = {}

    def publish(self, agent_id: int, intent: Intent):
        self._slots.pop(agent_id, None)
        self._slots[agent_id] = intent

    def peek_other(self, agent_id: int) -> Optional[Intent]:
        for author, intent in self._slots.items():
            if author != agent_id:
                return intent
        return None

    def get(self, agent_id: int) -> Optional[Intent]:
        return self._slots.get(agent_id)

    def clear(self):
        self._slots.clear()

    def __len__(self) -> int:
        return len(self._slots)
