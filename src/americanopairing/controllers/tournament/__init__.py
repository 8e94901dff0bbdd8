"""Tournament controllers."""

from americanopairing.controllers.tournament.result_recorder import ResultRecorder

__all__ = ["ResultRecorder"]
