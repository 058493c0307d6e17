"""
WarmNest - Guided Breathing and Focus Timing Core

Timing core of the WarmNest wellness companion. Sequences breathing
phases for guided exercises, bounds each exercise run as a session, and
drives the focus-mode Pomodoro and two-minute-rule timers.
"""

__version__ = "0.1.0"
__author__ = "WarmNest Team"
