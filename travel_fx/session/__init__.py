"""Session orchestration for the travel exchange planner."""

from .orchestrator import SeriesOrchestrator
from .state import LoadingFlags, SessionState

__all__ = ["LoadingFlags", "SeriesOrchestrator", "SessionState"]
