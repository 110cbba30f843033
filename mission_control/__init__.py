"""Mission Control - opportunity scouting for the agent dashboard."""

__version__ = "0.1.0"
