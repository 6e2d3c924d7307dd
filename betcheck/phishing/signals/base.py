from typing import Any, Dict, List

from betcheck.config import get_weight
from betcheck.phishing.models import SignalResult
from betcheck.types import ScoreMode


class Signal:
    """
    Base class for phishing signals.

    Attributes:
        name:   unique identifier for output and weight lookup
        order:  evaluation order; ``details`` follow it
        modes:  scorer modes in which the signal is active
    """

    name = "base"
    order = 0
    modes: List[ScoreMode] = [ScoreMode.SIMPLIFIED, ScoreMode.COMBINED]

    # Weight used when config.yaml does not define one, per mode
    default_weights: Dict[ScoreMode, float] = {}

    def weight(self, mode: ScoreMode, key: str = None, default: float = None) -> float:
        if default is None:
            default = self.default_weights.get(mode, 0.0)
        return float(get_weight(mode, key or self.name, default))

    # -------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------

    def hit(self, score: float, detail: str) -> SignalResult:
        """The signal fired and contributes ``score``."""
        return SignalResult(score=score, detail=detail)

    def miss(self) -> SignalResult:
        return SignalResult(score=0.0)

    # -------------------------------------------------------

    def run(self, domain: str, context: Dict[str, Any]) -> SignalResult:
        """
        MUST be overridden by each signal.

        context = {
            "mode": ScoreMode,
            "registry": Registry,
            "redirect_check": RedirectCheck | None,
        }
        """
        raise NotImplementedError()
