import pytest

from newversion.services.versioning import (
    Ordering,
    VersionNumber,
    VersionParseError,
    compare,
    compare_strings,
)


def test_parse_keeps_segments_and_source_text():
    version = VersionNumber.parse("1.10.02")

    assert version.segments == (1, 10, 2)
    assert str(version) == "1.10.02"


@pytest.mark.parametrize("text", ["", "1..2", "1.2.x", "-1.0", "1.2.", " 1.2", "1.2-beta", "１.2"])
def test_parse_rejects_invalid_segments(text):
    with pytest.raises(VersionParseError):
        VersionNumber.parse(text)


def test_parse_error_names_the_bad_segment():
    with pytest.raises(VersionParseError) as excinfo:
        VersionNumber.parse("2.rc.1")

    assert excinfo.value.segment == "rc"
    assert excinfo.value.text == "2.rc.1"


def test_compare_equal_and_first_difference_wins():
    assert compare_strings("1.2.3", "1.2.3") is Ordering.EQUAL
    assert compare_strings("1.3.0", "1.2.9") is Ordering.GREATER
    assert compare_strings("1.2.9", "1.3.0") is Ordering.LESS
    assert compare_strings("1.10.0", "1.9.0") is Ordering.GREATER


def test_compare_is_antisymmetric_for_equal_lengths():
    pairs = [("0.0.1", "0.1.0"), ("3.2.1", "3.2.0"), ("10.0", "9.99"), ("4.4", "4.4")]
    for left, right in pairs:
        a = VersionNumber.parse(left)
        b = VersionNumber.parse(right)
        assert compare(a, b).value == -compare(b, a).value
        assert compare(a, b).value == (a.segments > b.segments) - (a.segments < b.segments)


def test_compare_only_looks_at_the_shared_prefix():
    # Extra trailing segments never make a version newer or older.
    assert compare_strings("1.2", "1.2.5") is Ordering.EQUAL
    assert compare_strings("1.2.5", "1.2") is Ordering.EQUAL
    assert compare_strings("1.2", "1.3.0.1") is Ordering.LESS


def test_rich_comparisons_follow_compare():
    old = VersionNumber.parse("2.0.0")
    new = VersionNumber.parse("2.1")

    assert new > old
    assert old < new
    assert old <= VersionNumber.parse("2.0")
    assert old >= VersionNumber.parse("2.0")
    assert old != VersionNumber.parse("2.0")


def test_parse_rejects_oversized_segment():
    with pytest.raises(VersionParseError) as excinfo:
        VersionNumber.parse("1." + "9" * 5000)

    assert excinfo.value.segment == "9" * 5000


def test_compare_strings_is_part_of_the_package_api():
    import newversion

    assert newversion.compare_strings("2.0", "1.9.9") is Ordering.GREATER
