"""Grid interaction state.

The organizer's grid shows every generated window; clicking or dragging
across it toggles which windows are actually offered. On the participant
grid, pressing an answer and dragging paints that answer onto every slot
entered. Each interaction returns a new value, so handlers never mutate
shared state.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

from meetgrid.scheduling.aggregation import Availability
from meetgrid.scheduling.slots import SlotKey, SlotWindow

KeyLike = Union[SlotKey, SlotWindow, str]


def _as_key(item: KeyLike) -> SlotKey:
    if isinstance(item, SlotWindow):
        return item.key
    if isinstance(item, SlotKey):
        return item
    return SlotKey.parse(item)


@dataclass(frozen=True)
class SlotSelection:
    keys: FrozenSet[SlotKey] = frozenset()

    @classmethod
    def of(cls, items: Iterable[KeyLike]) -> "SlotSelection":
        return cls(frozenset(_as_key(item) for item in items))

    def toggle(self, item: KeyLike) -> "SlotSelection":
        key = _as_key(item)
        return SlotSelection(self.keys - {key} if key in self.keys else self.keys | {key})

    def drag(self, items: Iterable[KeyLike]) -> "SlotSelection":
        """Toggle each window entered during one drag, in order."""
        selection = self
        for item in items:
            selection = selection.toggle(item)
        return selection

    def includes(self, item: KeyLike) -> bool:
        return _as_key(item) in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def sorted_keys(self):
        return sorted(self.keys)


@dataclass(frozen=True)
class AnswerPaint:
    """A participant's answers plus the answer currently held down, if any.

    ``answers`` is never mutated; every transition copies it.
    """

    answers: Mapping[SlotKey, Availability] = field(default_factory=dict)
    brush: Optional[Availability] = None

    def set(self, item: KeyLike, availability: Availability) -> "AnswerPaint":
        answers = dict(self.answers)
        answers[_as_key(item)] = Availability(availability)
        return AnswerPaint(answers, self.brush)

    def press(self, availability: Availability) -> "AnswerPaint":
        return AnswerPaint(self.answers, Availability(availability))

    def enter(self, item: KeyLike) -> "AnswerPaint":
        # Hovering without a pressed answer changes nothing
        if self.brush is None:
            return self
        return self.set(item, self.brush)

    def release(self) -> "AnswerPaint":
        return AnswerPaint(self.answers, None)

    def drag(self, availability: Availability, items: Iterable[KeyLike]) -> "AnswerPaint":
        """Press ``availability``, enter each item in order, then release."""
        paint = self.press(availability)
        for item in items:
            paint = paint.enter(item)
        return paint.release()

    def choices(self) -> Dict[str, Availability]:
        """Answers keyed by slot key string, as the participant flow takes them."""
        return {str(key): availability for key, availability in sorted(self.answers.items())}
