from src.engclass.engclass.billing.payment_qr import build_payment_qr_url, tuition_memo


def test_memo_uppercases_student_name():
    assert tuition_memo("2025-03", "Nguyễn Minh Anh") == "HOC PHI THANG 2025-03 NGUYỄN MINH ANH"


def test_qr_url_template():
    url = build_payment_qr_url("MB", "0987654321", 300000, "HOC PHI THANG 2025-03 AN")

    assert url == "https://img.vietqr.io/image/MB-0987654321-compact.png?amount=300000&addInfo=HOC%20PHI%20THANG%202025-03%20AN"


def test_qr_url_encodes_unicode_and_custom_provider():
    url = build_payment_qr_url("VCB", "123", 0, "Học & phí", provider="https://qr.example.com/")

    assert url.startswith("https://qr.example.com/image/VCB-123-compact.png?amount=0&addInfo=")
    assert "&addInfo=H%E1%BB%8Dc%20%26%20ph%C3%AD" in url
