"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: tính học phí một tháng bằng record store trong bộ nhớ.
"""

from src.engclass.engclass.attendance.workflow import AttendanceCapture
from src.engclass.engclass.container import build_container


def main():
    container = build_container(store_config={"backend": "memory"})

    class_id = container.class_service.create_class(name="IELTS 6.5")
    student_id = container.student_service.create_student(name="Nguyễn Minh Anh", class_id=class_id)

    capture: AttendanceCapture = container.new_attendance_capture()
    capture.select_class(class_id)
    capture.set_date("2025-03-01")
    capture.set_topic("Speaking Part 1")
    capture.save()

    bill = container.billing_service.calculate(student_id=student_id, month="2025-03")
    print(container.billing_service.to_ui(bill))


if __name__ == "__main__":
    main()
