"""
Tests for kebab-case conversion.
"""
import pytest

from etls.core.strings import kebab_case


@pytest.mark.parametrize(
    "value,expected",
    [
        ("MyCoolEtl", "my-cool-etl"),
        ("etlAB", "etl-a-b"),
        ("Etl", "etl"),
        ("already-kebab", "already-kebab"),
        ("myCoolEtl", "my-cool-etl"),
        ("my_cool etl", "my-cool-etl"),
        ("My  Cool__Etl", "my-cool-etl"),
        ("__Etl__", "etl"),
        ("Etl2Go", "etl2-go"),
        ("etl", "etl"),
    ],
)
def test_kebab_case(value, expected):
    assert kebab_case(value) == expected


def test_kebab_case_is_idempotent():
    once = kebab_case("SomeLongEtlName")
    assert kebab_case(once) == once


def test_kebab_case_non_ascii_uppercase():
    assert kebab_case("ÉtlÜber") == "étl-über"


def test_kebab_case_only_separators():
    assert kebab_case("__ --") == ""
