"""
Utility functions module.

Clock formatting and progress helpers shared by the breathing session
and the focus timers.

Time Semantics:
- All timers measure time through their Scheduler, never the wall clock
- Durations are whole seconds
"""
