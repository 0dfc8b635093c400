"""Host-side models of an LED bar, LED stick, clock, sensor and serial protocol."""

__version__ = "0.1.0"