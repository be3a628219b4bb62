from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from ..core.constants import DEFAULT_QR_PROVIDER, QR_MEMO_TEMPLATE


@dataclass(frozen=True)
class PaymentAccount:
    bank_id: str
    account_number: str
    account_name: str = ""
    provider: str = DEFAULT_QR_PROVIDER


def tuition_memo(month: str, student_name: str) -> str:
    return QR_MEMO_TEMPLATE.format(month=month, student_name=(student_name or "").upper())


def build_payment_qr_url(bank_id: str, account_number: str, amount: int, memo: str, *, provider: str = DEFAULT_QR_PROVIDER) -> str:
    """URL of an externally rendered VietQR transfer image.

    The image is produced by the provider; nothing is generated locally.
    """
    base = (provider or DEFAULT_QR_PROVIDER).rstrip("/")
    add_info = quote(memo or "", safe="!*'()")
    return f"{base}/image/{bank_id}-{account_number}-compact.png?amount={int(amount)}&addInfo={add_info}"
