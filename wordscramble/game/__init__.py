from .state import GameState, SubmitResult
from .messages import REASONS, alert_for

__all__ = ["GameState", "SubmitResult", "REASONS", "alert_for"]
