#Expose the high-level pipeline pieces:
#Candidate ranking for the assignment screen
#Dispatcher orchestrator (the "one call" entry point for the operator)

from .dispatcher import AssignmentError, Dispatcher

__all__ = [
    "AssignmentError",
    "Dispatcher",
]
