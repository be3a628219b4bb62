from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    def list_classes():
        classes = container.class_service.list_classes()
        return ok(classes=[{"id": c.class_id, "name": c.name} for c in classes])

    @app.route("/api/classes", methods=["POST"], endpoint="create_class")
    def create_class():
        data = request.get_json(silent=True) or {}
        class_id = container.class_service.create_class(name=data.get("name", ""))
        return ok(201, id=class_id, message="Đã thêm lớp học")

    @app.route("/api/classes/<class_id>", methods=["DELETE"], endpoint="delete_class")
    def delete_class(class_id: str):
        container.class_service.delete_class(class_id)
        return ok(message="Đã xóa lớp học")
