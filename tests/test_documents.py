from health_companion.services import documents
from health_companion.services.documents import acquire_text, analyze_document


def test_plain_text_is_read():
    acq = acquire_text("note.txt", "text/plain", b"fever and cough")
    assert acq.status == "OK"
    assert acq.text == "fever and cough"


def test_content_type_alone_is_enough():
    acq = acquire_text("upload", "text/plain; charset=utf-8", b"cough")
    assert acq.status == "OK"


def test_bom_and_bad_bytes_are_tolerated():
    acq = acquire_text("note.txt", None, b"\xef\xbb\xbfcough \xff")
    assert acq.status == "OK"
    assert acq.text.startswith("cough")


def test_pdf_and_doc_are_unsupported():
    for name, ctype in (("report.pdf", "application/pdf"), ("letter.docx", None), ("scan.png", "image/png")):
        acq = acquire_text(name, ctype, b"%PDF-1.4 ...")
        assert acq.status == "UNSUPPORTED_FORMAT"
        assert acq.text is None
        assert acq.message


def test_oversized_upload(monkeypatch):
    monkeypatch.setattr(documents, "MAX_UPLOAD_BYTES", 4)
    acq = acquire_text("note.txt", "text/plain", b"12345")
    assert acq.status == "TOO_LARGE"
    assert acq.message == "File size must be less than 4 bytes."


def test_size_cap_message_units(monkeypatch):
    for cap, shown in ((2 * 1024 * 1024, "2MB"), (1536, "1.5KB")):
        monkeypatch.setattr(documents, "MAX_UPLOAD_BYTES", cap)
        acq = acquire_text("note.txt", "text/plain", b"x" * (cap + 1))
        assert acq.message == f"File size must be less than {shown}."


def test_analyze_document():
    ok = analyze_document("note.txt", "text/plain", b"Patient reports nausea. BP 120/80")
    assert ok.status == "OK"
    assert ok.extraction.symptoms == ["nausea"]
    assert ok.extraction.vital_signs == {"blood_pressure": "120/80"}

    bad = analyze_document("scan.pdf", "application/pdf", b"%PDF")
    assert bad.status == "UNSUPPORTED_FORMAT"
    assert bad.extraction is None
