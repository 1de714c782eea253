"""Unit tests for StateMachine."""

import pytest

from nicoass.core.exceptions import NicoAssError
from nicoass.core.state_machine import (
    BufferPhase,
    InvalidTransitionError,
    StateMachine,
    VotePhase,
    create_buffer_state_machine,
    create_vote_state_machine,
)


@pytest.mark.unit
class TestStateMachine:
    """Tests for generic StateMachine."""

    @pytest.fixture
    def simple_transitions(self):
        """Create simple transition map for testing."""
        return {
            "start": ["middle", "end"],
            "middle": ["end"],
            "end": [],
        }

    @pytest.fixture
    def state_machine(self, simple_transitions):
        """Create state machine with simple transitions."""
        return StateMachine("start", simple_transitions)

    def test_initial_state(self, state_machine):
        """Test that initial state is set correctly."""
        assert state_machine.current == "start"

    def test_can_transition(self, state_machine):
        """Test can_transition for valid and unknown targets."""
        assert state_machine.can_transition("middle") is True
        assert state_machine.can_transition("nonexistent") is False

    def test_transition_invalid_raises(self, state_machine):
        """Test invalid transition raises error with context."""
        state_machine.transition("middle")

        with pytest.raises(InvalidTransitionError) as exc_info:
            state_machine.transition("start")

        assert exc_info.value.current == "middle"
        assert exc_info.value.target == "start"
        assert exc_info.value.allowed == ["end"]
        assert exc_info.value.context["allowed"] == ["end"]
        assert isinstance(exc_info.value, NicoAssError)

    def test_transition_to_terminal_state(self, state_machine):
        """Test a terminal state allows no further transitions."""
        state_machine.transition("end")

        assert state_machine.current == "end"
        assert state_machine.allowed_transitions == []


@pytest.mark.unit
class TestConverterStateMachines:
    """Tests for the buffer and vote state machines."""

    def test_buffer_cycle(self):
        """Test the buffer alternates between empty and pending."""
        sm = create_buffer_state_machine()
        assert sm.current is BufferPhase.EMPTY

        sm.transition(BufferPhase.PENDING)
        sm.transition(BufferPhase.EMPTY)
        assert sm.current is BufferPhase.EMPTY

    def test_buffer_double_hold_rejected(self):
        """Test a second pending entry requires a flush first."""
        sm = create_buffer_state_machine()
        sm.transition(BufferPhase.PENDING)

        with pytest.raises(InvalidTransitionError):
            sm.transition(BufferPhase.PENDING)

    def test_vote_restart_allowed(self):
        """Test a poll may be restarted while open."""
        sm = create_vote_state_machine()
        sm.transition(VotePhase.OPEN)
        sm.transition(VotePhase.OPEN)
        assert sm.current is VotePhase.OPEN

    def test_vote_close_requires_open(self):
        """Test closing a closed poll is rejected."""
        sm = create_vote_state_machine()

        with pytest.raises(InvalidTransitionError):
            sm.transition(VotePhase.CLOSED)
