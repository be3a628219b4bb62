from __future__ import annotations

from flask import Flask

from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        overview = container.dashboard_service.overview()
        return ok(
            stats={"classes": overview.class_count, "students": overview.student_count},
            classes=overview.classes,
        )
