from __future__ import annotations

import csv
import io

from flask import Flask, request

from ..common.datetime_utils import current_month
from ..common.formatting import csv_safe
from ..common.responses import ok
from ..container import Container

SUMMARY_FIELDS = [
    "month",
    "student_id",
    "name",
    "parent_phone",
    "total_sessions",
    "default_fee",
    "total_amount",
    "status",
]


def register(app: Flask, container: Container) -> None:
    def _month() -> str:
        return (request.args.get("month") or current_month()).strip()

    @app.route("/api/billing", methods=["GET"], endpoint="billing")
    def billing():
        service = container.billing_service
        bill = service.calculate(student_id=request.args.get("student_id", ""), month=_month())
        return ok(bill=service.to_ui(bill))

    @app.route("/api/billing/summary", methods=["GET"], endpoint="billing_summary")
    def billing_summary():
        month = _month()
        rows = container.billing_service.monthly_summary(month=month)
        return ok(
            month=month,
            rows=rows,
            total_amount=sum(r["total_amount"] for r in rows),
        )

    @app.route("/api/billing/summary.csv", methods=["GET"], endpoint="billing_summary_csv")
    def billing_summary_csv():
        month = _month()
        rows = container.billing_service.monthly_summary(month=month)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow({k: csv_safe(row[k]) for k in SUMMARY_FIELDS})

        # utf-8-sig so Excel shows Vietnamese names correctly
        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"hoc_phi_{month.replace('-', '')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
