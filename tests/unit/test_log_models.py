from __future__ import annotations

import pytest
from pydantic import ValidationError

from logs.models import LogFileRecord, LogUpload


def test_from_path_reads_file_and_guesses_type(tmp_path):
    p = tmp_path / "report.json"
    p.write_bytes(b'{"ok": true}')

    upload = LogUpload.from_path(p)

    assert upload.name == "report.json"
    assert upload.data == b'{"ok": true}'
    assert upload.content_type == "application/json"
    assert upload.size == 12


def test_from_path_unknown_extension_defaults_to_octet_stream(tmp_path):
    p = tmp_path / "device.blob123"
    p.write_bytes(b"\x00\x01")

    upload = LogUpload.from_path(p, name="renamed.bin")

    assert upload.name == "renamed.bin"
    assert upload.content_type == "application/octet-stream"


def test_name_must_not_be_empty():
    with pytest.raises(ValidationError):
        LogUpload(name="", data=b"x")


def test_record_for_upload_uses_logs_prefix():
    upload = LogUpload(name="boot.log", data=b"abc", content_type="text/plain")
    rec = LogFileRecord.for_upload(upload)
    assert rec.file_path == "logs/boot.log"
    assert rec.file_size == 3
    assert rec.metadata == {"content_type": "text/plain"}
