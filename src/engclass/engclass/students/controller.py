from __future__ import annotations

from flask import Flask, request

from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        class_id = request.args.get("class_id") or None
        return ok(students=container.student_service.list_admin_view(class_id=class_id))

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        data = request.get_json(silent=True) or {}
        student_id = container.student_service.create_student(
            name=data.get("name", ""),
            class_id=data.get("class_id", ""),
            parent_phone=data.get("parent_phone", ""),
            default_fee=data.get("default_fee"),
        )
        return ok(201, id=student_id, message="Đã lưu học sinh")

    @app.route("/api/students/<student_id>/fee", methods=["PATCH"], endpoint="update_student_fee")
    def update_student_fee(student_id: str):
        data = request.get_json(silent=True) or {}
        fee = container.student_service.update_fee(student_id, default_fee=data.get("default_fee"))
        return ok(id=student_id, default_fee=fee, message="Đã cập nhật học phí")

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        container.student_service.delete_student(student_id)
        return ok(message="Đã xóa học sinh")
