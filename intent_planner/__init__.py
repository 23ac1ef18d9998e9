"""Edit intent planner: turns edit requests into structured code search plans."""

__version__ = "0.1.0"
