import logging

from vcfdedup.cli import USAGE, main

DOE_TWICE = (
    "BEGIN:VCARD\r\nVERSION:3.0\r\nN:Doe\r\nEND:VCARD\r\n"
    "BEGIN:VCARD\r\nVERSION:3.0\r\nN:Doe\r\nTEL:123\r\nEND:VCARD\r\n"
)


def test_missing_argument_prints_usage(capsys):
    assert main([]) == 2
    assert capsys.readouterr().out.strip() == USAGE


def test_dedupes_file_to_stdout(tmp_path, capsys):
    path = tmp_path / "contacts.vcf"
    path.write_bytes(DOE_TWICE.encode("utf-8"))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "BEGIN:VCARD\nVERSION:3.0\nN:Doe\nTEL:123\nEND:VCARD\n"


def test_empty_file_prints_nothing(tmp_path, capsys):
    path = tmp_path / "empty.vcf"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_unreadable_file_fails(tmp_path, capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([str(tmp_path / "missing.vcf")]) == 1
    assert capsys.readouterr().out == ""
    assert "Error reading file" in caplog.text


def test_malformed_file_fails_with_line_number(tmp_path, capsys, caplog):
    path = tmp_path / "bad.vcf"
    path.write_text("BEGIN:VCARD\nEND:VCARD\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""
    assert "line 2" in caplog.text


def test_non_utf8_file_fails(tmp_path, capsys, caplog):
    path = tmp_path / "latin1.vcf"
    path.write_bytes(b"BEGIN:VCARD\nVERSION:2.1\nN:M\xfcller\nEND:VCARD\n")
    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""
    assert "Error reading file" in caplog.text
