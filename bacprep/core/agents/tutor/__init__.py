"""
Bacalaureat tutor agent.
"""
from .gateway import FAILURE_POLICY, PROPAGATE, TutorGateway

__all__ = [
    "FAILURE_POLICY",
    "PROPAGATE",
    "TutorGateway",
]
