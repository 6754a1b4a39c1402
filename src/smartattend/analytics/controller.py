from __future__ import annotations

from flask import Flask

from ..common.http import json_view, ok, range_args
from ..container import Container
from .service import report_to_csv


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service

    @app.route("/api/batches/<batch_id>/analytics", methods=["GET"], endpoint="batch_analytics")
    @json_view
    def batch_analytics(batch_id: str):
        start, end = range_args(analytics.default_range())
        return ok(analytics=analytics.dashboard(batch_id, start, end).to_dict())

    @app.route("/api/batches/<batch_id>/summary", methods=["GET"], endpoint="batch_summary")
    @json_view
    def batch_summary(batch_id: str):
        return ok(
            summary=analytics.batch_summary(batch_id).to_dict(),
            recentTrend=[t.to_dict() for t in analytics.recent_trend(batch_id)],
        )

    @app.route("/api/batches/<batch_id>/report.csv", methods=["GET"], endpoint="batch_report_csv")
    @json_view
    def batch_report_csv(batch_id: str):
        start, end = range_args(analytics.default_range())
        data = analytics.build_student_report(batch_id, start, end)

        filename = f"attendance_{start.replace('-', '')}_{end.replace('-', '')}.csv"
        return app.response_class(
            report_to_csv(data),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/batches/<batch_id>/insights", methods=["POST"], endpoint="batch_insights")
    @json_view
    def batch_insights(batch_id: str):
        start, end = range_args(analytics.default_range())
        return ok(text=container.insight_service.generate_for_batch(batch_id, start, end))
