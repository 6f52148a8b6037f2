"""Root of the churnscope exception hierarchy.

The CLI catches ``ChurnscopeError`` and prints ``str(error)`` in red, so the
message should read as a complete sentence for the user, e.g.
``Not a git repository. ... (path=/tmp/x)``. Library callers can inspect
``details`` for the structured parts, such as the git return code or the
offending config key.
"""

from typing import Dict, Optional


class ChurnscopeError(Exception):
    """Any failure churnscope reports to its caller instead of crashing on.

    Args:
        message: User-facing description of what went wrong
        details: Structured context shown after the message as ``key=value``
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
