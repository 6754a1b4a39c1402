from __future__ import annotations

from ...core.constants import AT_RISK_THRESHOLD
from ..model import StudentStats
from .base import RiskClassifier


class ThresholdRiskClassifier(RiskClassifier):
    """Rate below threshold, only once at least one class was held."""

    def __init__(self, threshold: float = AT_RISK_THRESHOLD):
        self.threshold = float(threshold)

    def is_at_risk(self, student: StudentStats, total_classes_held: int) -> bool:
        return total_classes_held > 0 and student.rate < self.threshold
