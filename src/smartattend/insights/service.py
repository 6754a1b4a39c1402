from __future__ import annotations

import logging

from ..analytics.service import AnalyticsService
from ..batches.repository import BatchRepository
from ..core.constants import TREND_TAIL_SESSIONS, UNKNOWN_BATCH_NAME
from .gateway import InsightGateway
from .model import AtRiskEntry, InsightRequest

logger = logging.getLogger(__name__)


class InsightService:
    """Best-effort narrative for a batch; read-only and never raises on gateway failure."""

    def __init__(self, analytics: AnalyticsService, batches: BatchRepository, gateway: InsightGateway):
        self._analytics = analytics
        self._batches = batches
        self._gateway = gateway

    def build_request(self, batch_id: str, start: str, end: str) -> InsightRequest:
        dashboard = self._analytics.dashboard(batch_id, start, end)
        batch = self._batches.get_by_id(batch_id)
        analytics = dashboard.analytics
        return InsightRequest(
            batch_name=batch.name if batch else UNKNOWN_BATCH_NAME,
            total_classes=analytics.total_classes_held,
            attendance_rate=analytics.overall_rate,
            recent_trend=analytics.trend[-TREND_TAIL_SESSIONS:],
            at_risk_students=[
                AtRiskEntry(name=s.name, rate=s.rate, absent_count=s.absent_count) for s in dashboard.at_risk
            ],
        )

    def generate_for_batch(self, batch_id: str, start: str, end: str) -> str:
        request = self.build_request(batch_id, start, end)
        logger.info("Requesting insight for batch %s (%s..%s)", batch_id, start, end)
        return self._gateway.generate(request)
