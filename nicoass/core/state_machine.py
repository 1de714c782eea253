"""Guarded phase transitions.

The operator buffer and the vote overlay each keep a tiny state machine so
an out-of-order call (holding a second operator comment before the first
was flushed, closing a poll that never opened) fails loudly instead of
silently corrupting the output.

Example:
    >>> sm = create_buffer_state_machine()
    >>> sm.transition(BufferPhase.PENDING)
    >>> sm.current
    <BufferPhase.PENDING: 'pending'>
"""

from enum import Enum
from typing import Generic, TypeVar

from nicoass.core.exceptions import NicoAssError

T = TypeVar("T", bound=str | Enum)

TransitionMap = dict[T, list[T]]


class InvalidTransitionError(NicoAssError):
    """A transition not listed in the machine's map was requested."""

    def __init__(self, current: T, target: T, allowed: list[T] | None = None):
        self.current = current
        self.target = target
        self.allowed = allowed or []
        names = [str(state) for state in self.allowed]
        super().__init__(
            message=f"Invalid transition from '{current}' to '{target}'. "
            f"Allowed transitions: {', '.join(names) or 'none'}",
            context={"current": str(current), "target": str(target), "allowed": names},
        )


class StateMachine(Generic[T]):
    """Current state plus the map of states reachable from each state."""

    def __init__(self, initial: T, transitions: TransitionMap[T]):
        self._current = initial
        self._transitions = transitions

    @property
    def current(self) -> T:
        return self._current

    @property
    def allowed_transitions(self) -> list[T]:
        return self._transitions.get(self._current, [])

    def can_transition(self, target: T) -> bool:
        return target in self.allowed_transitions

    def transition(self, target: T) -> None:
        """Move to ``target``.

        Raises:
            InvalidTransitionError: If ``target`` is not reachable from here
        """
        if not self.can_transition(target):
            raise InvalidTransitionError(self._current, target, self.allowed_transitions)
        self._current = target


class BufferPhase(str, Enum):
    """Whether an operator comment is waiting to be drawn."""

    EMPTY = "empty"
    PENDING = "pending"


class VotePhase(str, Enum):
    """Whether a poll is on screen."""

    CLOSED = "closed"
    OPEN = "open"


BUFFER_TRANSITIONS: TransitionMap[BufferPhase] = {
    BufferPhase.EMPTY: [BufferPhase.PENDING],
    BufferPhase.PENDING: [BufferPhase.EMPTY],
}

VOTE_TRANSITIONS: TransitionMap[VotePhase] = {
    VotePhase.CLOSED: [VotePhase.OPEN],
    # "start" while open restarts the poll
    VotePhase.OPEN: [VotePhase.OPEN, VotePhase.CLOSED],
}


def create_buffer_state_machine() -> StateMachine[BufferPhase]:
    """Operator buffer machine, starting EMPTY."""
    return StateMachine(BufferPhase.EMPTY, BUFFER_TRANSITIONS)


def create_vote_state_machine() -> StateMachine[VotePhase]:
    """Vote overlay machine, starting CLOSED."""
    return StateMachine(VotePhase.CLOSED, VOTE_TRANSITIONS)
