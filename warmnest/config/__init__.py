"""
Configuration module.

Frozen dataclass defaults, YAML overrides and validation for the focus
timers, logging and the breathing exercise catalog.
"""
