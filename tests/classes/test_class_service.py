from __future__ import annotations

import pytest

from src.engclass.engclass.core.exceptions import NotFound, ValidationError


def test_create_requires_name(container):
    with pytest.raises(ValidationError):
        container.class_service.create_class(name="  ")


def test_delete_class_keeps_students(container):
    class_id = container.class_service.create_class(name="IELTS")
    student_id = container.student_service.create_student(name="An", class_id=class_id)

    container.class_service.delete_class(class_id)

    student = container.student_service.get_student(student_id)
    assert student is not None
    assert student.class_id == class_id
    assert container.class_service.get_class(class_id) is None


def test_orphaned_student_shows_unassigned(container):
    class_id = container.class_service.create_class(name="IELTS")
    container.student_service.create_student(name="An", class_id=class_id)
    container.class_service.delete_class(class_id)

    rows = container.student_service.list_admin_view()

    assert rows[0]["class_name"] == "Chưa xếp lớp"


def test_delete_missing_class_raises(container):
    with pytest.raises(NotFound):
        container.class_service.delete_class("missing")
