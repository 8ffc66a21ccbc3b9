"""Tests for the idle/active coordinator driven by a fake clock."""

from dialectcss.compiler import Compiler
from dialectcss.config import CompilerConfig
from dialectcss.coordinator import Coordinator, CoordinatorState, TimerSlot
from dialectcss.decoration import InMemoryPage
from dialectcss.events import (
    CoordinatorActivated,
    CoordinatorIdled,
    DecorationsCleared,
    StylesheetCompiled,
)

USER_BLOCK = '.mes[is_user="true"] .mes_block'
HALO = "@用户消息:光环 { 宽度: 20像素 }"
STYLES = "聊天区域 {\n  宽度: 10像素\n}"


def _coordinator(clock, display=None, page=None):
    if page is None:
        page = InMemoryPage()
        page.add("u1", USER_BLOCK)
    compiler = Compiler(CompilerConfig(debounce_seconds=0.25, idle_timeout_seconds=3.0), page=page)
    return Coordinator(compiler, clock=clock, display=display)


# ---------------------------------------------------------------------------
# TimerSlot
# ---------------------------------------------------------------------------


class TestTimerSlot:
    def test_fires_once_at_deadline(self):
        slot = TimerSlot("t")
        slot.arm(10.0, 1.0)
        assert not slot.fire_if_due(10.5)
        assert slot.fire_if_due(11.0)
        assert not slot.fire_if_due(12.0)

    def test_rearm_replaces_deadline(self):
        slot = TimerSlot("t")
        slot.arm(0.0, 1.0)
        slot.arm(0.5, 1.0)
        assert not slot.fire_if_due(1.2)
        assert slot.fire_if_due(1.5)

    def test_remaining_and_cancel(self):
        slot = TimerSlot("t")
        assert slot.remaining(0.0) is None
        slot.arm(0.0, 2.0)
        assert slot.remaining(0.5) == 1.5
        slot.cancel()
        assert not slot.armed


# ---------------------------------------------------------------------------
# State transitions
# ---------------------------------------------------------------------------


class TestStateTransitions:
    def test_starts_idle(self, clock):
        assert _coordinator(clock).state is CoordinatorState.IDLE

    def test_focus_activates(self, clock):
        coordinator = _coordinator(clock)
        events = []
        coordinator.bus.subscribe(CoordinatorActivated, events.append)
        coordinator.on_focus()
        assert coordinator.state is CoordinatorState.ACTIVE
        assert events == [CoordinatorActivated("focus")]

    def test_activation_event_only_on_transition(self, clock):
        coordinator = _coordinator(clock)
        events = []
        coordinator.bus.subscribe(CoordinatorActivated, events.append)
        coordinator.on_focus()
        coordinator.on_input("x")
        coordinator.on_paste("y")
        assert len(events) == 1

    def test_idles_after_timeout(self, clock):
        coordinator = _coordinator(clock)
        idled = []
        coordinator.bus.subscribe(CoordinatorIdled, idled.append)
        coordinator.on_focus()
        coordinator.poll(clock.advance(2.5))
        assert coordinator.state is CoordinatorState.ACTIVE
        coordinator.poll(clock.advance(0.5))
        assert coordinator.state is CoordinatorState.IDLE
        assert idled[0].idle_seconds == 3.0

    def test_activity_restarts_idle_timer(self, clock):
        coordinator = _coordinator(clock)
        coordinator.on_focus()
        clock.advance(2.0)
        coordinator.on_input(STYLES)
        coordinator.poll(clock.advance(2.0))
        assert coordinator.state is CoordinatorState.ACTIVE
        coordinator.poll(clock.advance(1.0))
        assert coordinator.state is CoordinatorState.IDLE

    def test_status(self, clock):
        coordinator = _coordinator(clock)
        coordinator.on_input("abc")
        status = coordinator.status()
        assert status["state"] == "active"
        assert status["debounce_pending"] is True
        assert status["idle_in"] == 3.0
        assert status["text_length"] == 3


# ---------------------------------------------------------------------------
# Debounced compile
# ---------------------------------------------------------------------------


class TestDebounce:
    def test_rapid_edits_compile_once_with_latest_text(self, clock):
        coordinator = _coordinator(clock)
        compiled = []
        coordinator.bus.subscribe(StylesheetCompiled, compiled.append)
        coordinator.on_input("聊天区域 {\n  宽度: 1像素\n}")
        clock.advance(0.125)
        coordinator.on_input(STYLES)
        assert coordinator.poll(clock.advance(0.125)) is None
        result = coordinator.poll(clock.advance(0.125))
        assert result is not None
        assert len(compiled) == 1
        assert "width: 10px" in result.canonical

    def test_poll_without_activity_returns_none(self, clock):
        assert _coordinator(clock).poll() is None

    def test_display_receives_regenerated_text(self, clock):
        shown = []
        coordinator = _coordinator(clock, display=shown.append)
        coordinator.on_input("聊天区域 {\n  宽度：10像素\n}")
        coordinator.poll(clock.advance(0.25))
        assert shown == ["# 布局样式\n" + STYLES]
        assert coordinator.text == shown[0]

    def test_display_echo_is_suppressed(self, clock):
        coordinator = None

        def echo(text):
            coordinator.on_input(text)

        coordinator = _coordinator(clock, display=echo)
        coordinator.on_input(STYLES)
        coordinator.poll(clock.advance(0.25))
        assert coordinator.status()["debounce_pending"] is False

    def test_unparseable_input_keeps_previous_output(self, clock):
        shown = []
        coordinator = _coordinator(clock, display=shown.append)
        coordinator.on_input(STYLES)
        first = coordinator.poll(clock.advance(0.25))
        coordinator.on_input("随便写点什么")
        second = coordinator.poll(clock.advance(0.25))
        assert not second.applied
        assert second.canonical == first.canonical
        assert len(shown) == 1


# ---------------------------------------------------------------------------
# Decorations
# ---------------------------------------------------------------------------


class TestDecorations:
    def test_compile_materializes_decorations(self, clock):
        coordinator = _coordinator(clock)
        coordinator.on_input(HALO)
        coordinator.poll(clock.advance(0.25))
        assert coordinator.compiler.decorations.node_count() == 1

    def test_idle_clears_nodes_when_syntax_gone(self, clock):
        coordinator = _coordinator(clock)
        cleared = []
        coordinator.bus.subscribe(DecorationsCleared, cleared.append)
        coordinator.on_input(HALO)
        coordinator.poll(clock.advance(0.25))
        coordinator.on_input(STYLES)
        # The debounced compile and the idle sweep fire in the same poll.
        coordinator.poll(clock.advance(3.0))
        assert coordinator.state is CoordinatorState.IDLE
        assert coordinator.compiler.decorations.node_count() == 0
        assert cleared == [DecorationsCleared(1)]

    def test_idle_keeps_nodes_when_syntax_present(self, clock):
        coordinator = _coordinator(clock)
        coordinator.on_input(HALO)
        coordinator.poll(clock.advance(0.25))
        coordinator.poll(clock.advance(3.0))
        assert coordinator.state is CoordinatorState.IDLE
        assert coordinator.compiler.decorations.node_count() == 1

    def test_idle_sweep_removes_stale_nodes(self, clock):
        coordinator = _coordinator(clock)
        cleared = []
        coordinator.bus.subscribe(DecorationsCleared, cleared.append)
        coordinator.on_input(HALO)
        coordinator.poll(clock.advance(0.25))
        # Host replaced the text without an input event.
        coordinator.text = STYLES
        coordinator.poll(clock.advance(3.0))
        assert coordinator.compiler.decorations.node_count() == 0
        assert cleared == [DecorationsCleared(1)]

    def test_new_elements_decorated_while_idle(self, clock):
        page = InMemoryPage()
        coordinator = _coordinator(clock, page=page)
        coordinator.on_input(HALO)
        coordinator.poll(clock.advance(0.25))
        coordinator.poll(clock.advance(3.0))
        assert coordinator.state is CoordinatorState.IDLE
        late = page.add("late", USER_BLOCK)
        coordinator.on_elements_added([late])
        coordinator.poll(clock.advance(1.0))
        assert len(late.children) == 1

    def test_destroy(self, clock):
        coordinator = _coordinator(clock)
        coordinator.on_input(HALO)
        coordinator.poll(clock.advance(0.25))
        coordinator.destroy()
        assert coordinator.state is CoordinatorState.IDLE
        assert coordinator.compiler.decorations.node_count() == 0
        assert coordinator.poll(clock.advance(10.0)) is None
