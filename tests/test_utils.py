from adventatlas.utils import format_bytes


def test_format_bytes():
    assert format_bytes(584) == "584 B"
    assert format_bytes(2048) == "2.00 KB"
    assert format_bytes(48381165) == "46.14 MB"
    assert format_bytes(-1) == "-1"
