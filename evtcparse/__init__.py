"""Reading and writing of ArcDPS EVTC combat logs, plain and compressed."""

__version__ = "0.13.0"

__all__ = ["agent", "errors", "event", "header", "log", "skill", "util"]