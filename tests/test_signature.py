import pytest

from filemeta.model import SignatureRule
from filemeta.signature import PREFIX_SIZE, SIGNATURES, identify, identify_file, read_prefix


FIXTURES = [
    (b"#!/bin/sh\n", "Shell script"),
    (b"SQLite format 3\x00", "SQLite database"),
    (b"\x00\x00\x01\x00\x01\x00", "Computer ICO icon file"),
    (b"GIF89a", "GIF"),
    (b"GIF87a", "GIF"),
    (b"\xff\xd8\xff\xee", "JPG"),
    (b"Rar!\x1a\x07\x00", "RAR"),
    (b"\x89PNG\r\n\x1a\n", "PNG"),
    (b"\xca\xfe\xba\xbe\x00\x00\x00\x34", "Java class file"),
    (b"%PDF-1.7", "PDF"),
    (b"ID3\x04\x00", "MP3"),
    (b"CD001", "ISO"),
    (b"Cr24\x02\x00\x00\x00", "Chrome extension archive"),
    (b"\x00\x00\x00\x18ftypmp42", "MP4"),
]


@pytest.mark.parametrize("head,label", FIXTURES)
def test_identify_known_signatures(head, label):
    assert identify(head) == label
    assert identify(head.ljust(PREFIX_SIZE, b"\x00")) == label


def test_identify_unknown():
    assert identify(b"\x00" * 16) == "unknown"
    assert identify(b"hello world, plain text") == "unknown"
    assert identify(b"") == "unknown"


def test_prefix_size_covers_table():
    assert PREFIX_SIZE == 16


def test_short_prefix_compares_against_padding():
    # SQLite's last constrained byte is 0x00 at offset 15; padding supplies it.
    assert identify(b"SQLite format 3") == "SQLite database"
    # GIF needs byte 5 == 'a'; a 4-byte prefix pads it with 0x00.
    assert identify(b"GIF8") == "unknown"


def test_gif_wildcard_byte():
    assert identify(b"GIF8Xa") == "GIF"
    assert identify(b"GIF89b") == "unknown"


def test_jpg_requires_all_four_bytes():
    assert identify(b"\xff\xd8\xff\xe0") == "unknown"


def test_no_rule_is_shadowed():
    for rule in SIGNATURES:
        head = bytearray(PREFIX_SIZE)
        for offset, value in rule.pattern:
            head[offset] = value
        assert identify(bytes(head)) == rule.label


def test_from_mask_rejects_bad_masks():
    with pytest.raises(ValueError):
        SignatureRule.from_mask("odd", "ABC")
    with pytest.raises(ValueError):
        SignatureRule.from_mask("empty", "????")


def test_from_mask_skips_wildcards():
    rule = SignatureRule.from_mask("GIF", "47494638??61")
    assert rule.pattern == ((0, 0x47), (1, 0x49), (2, 0x46), (3, 0x38), (5, 0x61))
    assert rule.span == 6


def test_rules_are_immutable():
    with pytest.raises(AttributeError):
        SIGNATURES[0].label = "changed"  # type: ignore[misc]


def test_read_prefix_pads_short_file(tmp_path):
    p = tmp_path / "short.bin"
    p.write_bytes(b"ID3")
    assert read_prefix(p) == b"ID3" + b"\x00" * 13


def test_read_prefix_truncates_long_file(tmp_path):
    p = tmp_path / "long.bin"
    p.write_bytes(bytes(range(64)))
    assert read_prefix(p) == bytes(range(16))


def test_identify_file(tmp_path):
    p = tmp_path / "image"
    p.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 100)
    assert identify_file(p) == "PNG"


def test_identify_file_missing(tmp_path):
    with pytest.raises(OSError):
        identify_file(tmp_path / "missing")
