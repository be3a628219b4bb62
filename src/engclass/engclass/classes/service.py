from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.logging import get_logger
from .model import SchoolClass
from .repository import ClassRepository

logger = get_logger(__name__)


class ClassService:
    """Use case: manage classes.

    Deleting a class never touches its students; their class_id is left
    dangling and shows up as unassigned.
    """

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_classes(self) -> Sequence[SchoolClass]:
        return self._classes.list_all()

    def get_class(self, class_id: str) -> Optional[SchoolClass]:
        return self._classes.get_by_id(class_id)

    def create_class(self, *, name: str) -> str:
        name = require_non_empty(name, "Tên lớp")
        class_id = self._classes.create(name=name)
        logger.info("class created", extra={"class_id": class_id})
        return class_id

    def delete_class(self, class_id: str) -> None:
        self._classes.delete_by_id(class_id)
        logger.info("class deleted", extra={"class_id": class_id})
