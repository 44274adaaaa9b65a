"""Timer core: session state machine, engine, dispatcher and frame loop."""

from pomobox.core.frame_loop import FrameLoop
from pomobox.core.input_dispatcher import InputDispatcher
from pomobox.core.keypad_bridge import KeypadBridge
from pomobox.core.snapshot import TimerSnapshot, build_snapshot
from pomobox.core.timer_engine import TickOutcome, TimerEngine

__all__ = [
    "FrameLoop",
    "InputDispatcher",
    "KeypadBridge",
    "TickOutcome",
    "TimerEngine",
    "TimerSnapshot",
    "build_snapshot",
]
