from __future__ import annotations

from flask import Flask

from ..common.http import json_body, json_view, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/batches", methods=["GET"], endpoint="list_batches")
    @json_view
    def list_batches():
        batches = container.batch_service.list_batches()
        return ok(batches=[b.to_dict() for b in batches])

    @app.route("/api/batches", methods=["POST"], endpoint="create_batch")
    @json_view
    def create_batch():
        data = json_body()
        batch = container.batch_service.create_batch(data.get("name", ""), data.get("description"))
        return ok(201, batch=batch.to_dict())

    @app.route("/api/batches/<batch_id>", methods=["GET"], endpoint="get_batch")
    @json_view
    def get_batch(batch_id: str):
        return ok(batch=container.batch_service.get_batch(batch_id).to_dict())
