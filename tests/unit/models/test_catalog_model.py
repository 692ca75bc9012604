"""Tests for test id helpers and the catalog model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from webdrive_runner.models.catalog import (
    TestCatalog,
    display_name,
    is_automation_test,
    legacy_result_basename,
    result_basename,
)

TEST_IDS = [
    "Foo.class",
    "models.UserTest.class",
    "Application$Inner.class",
    "Basic.test.html",
    "admin/Login.test.html",
    "weird.class.class",
    "a/class",
    "Plain",
]


@pytest.mark.parametrize(
    ("test_id", "expected"),
    [
        ("Foo.class", "Foo"),
        ("models.UserTest.class", "models/UserTest"),
        ("Application$Inner.class", "Application/Inner"),
        ("Basic.test.html", "Basic"),
        ("admin/Login.test.html", "admin/Login"),
    ],
)
def test_display_name(test_id: str, expected: str) -> None:
    """Strips known suffixes and turns separators into slashes."""
    assert display_name(test_id) == expected


@pytest.mark.parametrize(
    ("test_id", "expected"),
    [
        ("Foo.class", "Foo"),
        ("models.UserTest.class", "models.UserTest"),
        ("Basic.test.html", "Basic"),
        ("admin/Login.test.html", "admin.Login"),
    ],
)
def test_result_basename(test_id: str, expected: str) -> None:
    """Strips known suffixes and makes the name filename-safe."""
    assert result_basename(test_id) == expected


def test_legacy_result_basename_keeps_suffix() -> None:
    """Keeps the raw id, only replacing path separators."""
    assert legacy_result_basename("admin/Login.test.html") == "admin.Login.test.html"


@pytest.mark.parametrize("test_id", TEST_IDS)
def test_normalization_is_idempotent(test_id: str) -> None:
    """Applying a normalization twice equals applying it once."""
    assert display_name(display_name(test_id)) == display_name(test_id)
    assert result_basename(result_basename(test_id)) == result_basename(test_id)


@pytest.mark.parametrize("test_id", TEST_IDS)
def test_normalization_removes_separators(test_id: str) -> None:
    """Normalized names never contain the characters they replace."""
    assert "." not in display_name(test_id)
    assert "$" not in display_name(test_id)
    assert "/" not in result_basename(test_id)


@pytest.mark.parametrize(
    ("test_id", "expected"),
    [
        ("Basic.test.html", True),
        ("admin/Login.test.html", True),
        ("Foo.class", False),
        ("test.htmlish.class", False),
        ("Plain", False),
    ],
)
def test_is_automation_test(test_id: str, expected: bool) -> None:
    """Classifies by presence of the HTML suite marker."""
    assert is_automation_test(test_id) is expected


def test_name_width_uses_longest_display_name() -> None:
    """Computes the console column width over both test kinds."""
    catalog = TestCatalog(
        result_root=Path("/tmp/r"),
        trigger_url_fragment="/test",
        automation_tests=("admin/Login.test.html",),
        class_tests=("Foo.class",),
    )

    assert catalog.name_width == len("admin/Login")


def test_name_width_of_empty_catalog() -> None:
    """Is zero when there are no tests."""
    catalog = TestCatalog(result_root=Path("/tmp/r"), trigger_url_fragment="/test")

    assert catalog.name_width == 0


@pytest.mark.parametrize("field", ["automation_tests", "class_tests"])
def test_rejects_duplicate_test_ids(field: str) -> None:
    """Refuses a sequence naming the same test twice."""
    test_id = "Basic.test.html" if field == "automation_tests" else "Foo.class"

    with pytest.raises(ValidationError, match="duplicate test ids"):
        TestCatalog(
            result_root=Path("/tmp/r"),
            trigger_url_fragment="/test",
            **{field: (test_id, test_id)},
        )
