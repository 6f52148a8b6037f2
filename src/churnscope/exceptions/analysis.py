"""Analysis-related exceptions: repository access, log fetching, mode dispatch."""

from typing import List, Optional, Sequence

from .base import ChurnscopeError

# Substring git prints when the current branch has no commits yet
EMPTY_HISTORY_MARKER = "does not have any commits"


class AnalysisError(ChurnscopeError):
    """Base class for analysis-related errors."""
    pass


class NotARepositoryError(AnalysisError):
    """Raised when the working directory is not inside a git repository."""

    def __init__(self, path: Optional[str] = None):
        details = {"path": path} if path else None
        super().__init__(
            "Not a git repository. Please run this command in a git repository.",
            details=details,
        )
        self.path = path


class UnknownModeError(AnalysisError):
    """Raised when an analysis mode has no registered handler."""

    def __init__(self, mode: str, valid_modes: Sequence[str]):
        super().__init__(
            f"Unknown analysis mode: {mode}",
            details={"valid": ", ".join(valid_modes)},
        )
        self.mode = mode
        self.valid_modes = list(valid_modes)


class GitCommandError(AnalysisError):
    """Raised when a git invocation exits non-zero."""

    def __init__(self, args: List[str], stderr: str, returncode: Optional[int] = None):
        message = stderr.strip() or f"git {' '.join(args)} failed"
        details = {"returncode": str(returncode)} if returncode is not None else None
        super().__init__(message, details=details)
        self.args_list = list(args)
        self.stderr = stderr
        self.returncode = returncode

    @property
    def is_empty_history(self) -> bool:
        """True when git refused because the branch has no commits."""
        return EMPTY_HISTORY_MARKER in self.stderr
