"""Models for the test catalog served by the application under test."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import Field, field_validator

from webdrive_runner.models.base import Model

AUTOMATION_SUITE_MARKER = ".test.html"
CLASS_SUFFIX = ".class"
KNOWN_SUFFIXES = (CLASS_SUFFIX, AUTOMATION_SUITE_MARKER)


class TestCatalog(Model):
    """Parsed test manifest plus the run configuration it carries."""

    __test__ = False

    result_root: Path = Field(..., description="Directory the app writes results to")
    trigger_url_fragment: str = Field(
        ..., description="URL path of the HTML suite runner"
    )
    automation_tests: Sequence[str] = Field(
        default_factory=tuple, description="HTML suite tests, in manifest order"
    )
    class_tests: Sequence[str] = Field(
        default_factory=tuple, description="Server-side tests, in manifest order"
    )

    @field_validator("automation_tests", "class_tests")
    @classmethod
    def _check_unique(cls, value: Sequence[str]) -> Sequence[str]:
        duplicates = sorted({test_id for test_id in value if value.count(test_id) > 1})
        if duplicates:
            raise ValueError(f"duplicate test ids: {duplicates}")
        return value

    @property
    def name_width(self) -> int:
        """Length of the longest display name, for aligned console output."""
        names = [*self.automation_tests, *self.class_tests]
        return max((len(display_name(name)) for name in names), default=0)


def is_automation_test(test_id: str) -> bool:
    """Return True if the test is an HTML suite driven through a browser."""
    return AUTOMATION_SUITE_MARKER in test_id


def _strip_suffixes(value: str) -> str:
    stripped = True
    while stripped:
        stripped = False
        for suffix in KNOWN_SUFFIXES:
            if value.endswith(suffix):
                value = value.removesuffix(suffix)
                stripped = True
    return value


def display_name(test_id: str) -> str:
    """Derive the path-like name shown on the console.

    ``models.UserTest.class`` becomes ``models/UserTest`` and
    ``Application$Inner.class`` becomes ``Application/Inner``.
    """
    return _strip_suffixes(test_id).replace(".", "/").replace("$", "/")


def result_basename(test_id: str) -> str:
    """Derive the basename of the result markers for a test.

    ``Foo.class`` becomes ``Foo`` and ``pkg/Basic.test.html`` becomes
    ``pkg.Basic``.
    """
    return _strip_suffixes(test_id.replace("/", "."))


def legacy_result_basename(test_id: str) -> str:
    """Marker basename as written by Play itself, keeping the suffix."""
    return test_id.replace("/", ".")
