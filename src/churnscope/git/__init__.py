"""Log sources: the boundary between git and the parsers."""

from .client import GitLogSource
from .source import LogQuery, LogSource

__all__ = ["GitLogSource", "LogQuery", "LogSource"]
