"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from webdrive_runner.models.catalog import TestCatalog
from webdrive_runner.models.result import RunOutcome, TestResult


class TestResultFactory(DataclassFactory[TestResult]):
    """Factory for TestResult."""

    __test__ = False
    __model__ = TestResult

    status = "passed"


class RunOutcomeFactory(DataclassFactory[RunOutcome]):
    """Factory for RunOutcome."""

    __model__ = RunOutcome

    results = Use(list[TestResult])


class TestCatalogFactory(ModelFactory[TestCatalog]):
    """Factory for TestCatalog."""

    __test__ = False
    __model__ = TestCatalog

    trigger_url_fragment = "/@tests/selenium/TestRunner.html"
    automation_tests = Use(tuple)
    class_tests = Use(tuple)
