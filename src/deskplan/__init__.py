"""deskplan — desk layout planner for teams with dog preferences."""

__version__ = "0.1.0"
