from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import BatchAnalytics, StudentStats


class RiskClassifier(ABC):
    """Classifier interface (Strategy Pattern for at-risk detection)."""

    @abstractmethod
    def is_at_risk(self, student: StudentStats, total_classes_held: int) -> bool:
        raise NotImplementedError

    def at_risk(self, analytics: BatchAnalytics) -> list[StudentStats]:
        """At-risk subset, keeping the engine's worst-first order."""

        return [s for s in analytics.per_student if self.is_at_risk(s, analytics.total_classes_held)]
