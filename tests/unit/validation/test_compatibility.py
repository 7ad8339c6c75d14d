"""Unit tests for the advisory FilterCompatibilityChecker."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from ssm_filters.validation import (
    MAX_VALUE_LENGTH,
    MAX_VALUES_PER_FILTER,
    FilterCompatibilityChecker,
)
from ssm_filters.value_object import ParameterQueryOperation, ParameterStringFilter

DESCRIBE = ParameterQueryOperation.DESCRIBE_PARAMETERS
BY_PATH = ParameterQueryOperation.GET_PARAMETERS_BY_PATH


def _f(key: str, option: str | None = None, values: list[str] | None = None) -> ParameterStringFilter:
    return ParameterStringFilter.from_input({"Key": key, "Option": option, "Values": values})


@pytest.fixture()
def checker() -> FilterCompatibilityChecker:
    return FilterCompatibilityChecker()


class TestDescribeParameters:
    @pytest.mark.parametrize(
        "key,option",
        [
            ("Name", "Equals"),
            ("Name", "BeginsWith"),
            ("Name", "Contains"),
            ("Path", "Recursive"),
            ("Path", "OneLevel"),
            ("Type", "Equals"),
            ("Tier", "BeginsWith"),
            ("DataType", "Equals"),
            ("tag:env", "Equals"),
            ("KeyId", None),
        ],
    )
    def test_supported(self, checker: FilterCompatibilityChecker, key: str, option: str | None) -> None:
        assert checker.check(_f(key, option, ["v"]), DESCRIBE) == []

    def test_label_is_not_supported(self, checker: FilterCompatibilityChecker) -> None:
        problems = checker.check(_f("Label", "Equals", ["live"]), DESCRIBE)
        assert len(problems) == 1
        assert "Label" in problems[0]

    def test_tag_key_rejects_contains(self, checker: FilterCompatibilityChecker) -> None:
        assert checker.check(_f("tag:env", "Contains", ["pr"]), DESCRIBE)

    def test_contains_only_for_name(self, checker: FilterCompatibilityChecker) -> None:
        assert checker.check(_f("Type", "Contains", ["String"]), DESCRIBE)

    def test_path_rejects_equals(self, checker: FilterCompatibilityChecker) -> None:
        problems = checker.check(_f("Path", "Equals", ["/app"]), DESCRIBE)
        assert "OneLevel" in problems[0]

    def test_accepts_operation_name(self, checker: FilterCompatibilityChecker) -> None:
        assert checker.check(_f("Name", "Equals"), "DescribeParameters") == []


class TestGetParametersByPath:
    @pytest.mark.parametrize("key", ["Name", "Path", "Tier", "DataType", "tag:team"])
    def test_unsupported_keys(self, checker: FilterCompatibilityChecker, key: str) -> None:
        assert checker.check(_f(key, "Equals", ["x"]), BY_PATH)

    @pytest.mark.parametrize("key", ["Type", "KeyId", "Label"])
    def test_supported_keys(self, checker: FilterCompatibilityChecker, key: str) -> None:
        assert checker.check(_f(key, "Equals", ["x"]), BY_PATH) == []

    def test_tag_key_is_reported(self, checker: FilterCompatibilityChecker) -> None:
        problems = checker.check(_f("tag:team", "Equals", ["platform"]), BY_PATH)
        assert problems == ["Tag key 'tag:team' is not supported by GetParametersByPath"]

    def test_label_only_equals(self, checker: FilterCompatibilityChecker) -> None:
        assert checker.check(_f("Label", "BeginsWith", ["li"]), BY_PATH)

    def test_recursive_is_not_an_option(self, checker: FilterCompatibilityChecker) -> None:
        assert checker.check(_f("Type", "Recursive"), BY_PATH)


class TestLimits:
    def test_too_many_values(self, checker: FilterCompatibilityChecker) -> None:
        values = [str(i) for i in range(MAX_VALUES_PER_FILTER + 1)]
        problems = checker.check(_f("Name", "Equals", values), DESCRIBE)
        assert len(problems) == 1
        assert str(MAX_VALUES_PER_FILTER) in problems[0]

    def test_value_too_long(self, checker: FilterCompatibilityChecker) -> None:
        problems = checker.check(_f("Name", "Equals", ["x" * (MAX_VALUE_LENGTH + 1)]), DESCRIBE)
        assert len(problems) == 1

    def test_limits_inclusive(self, checker: FilterCompatibilityChecker) -> None:
        values = ["x" * MAX_VALUE_LENGTH] * MAX_VALUES_PER_FILTER
        assert checker.check(_f("Name", "Equals", values), DESCRIBE) == []


class TestReporting:
    def test_never_raises_and_filter_is_untouched(self, checker: FilterCompatibilityChecker) -> None:
        f = _f("Label", "Recursive", ["a"])
        checker.check(f, DESCRIBE)
        assert f.request_body() == {"Key": "Label", "Option": "Recursive", "Values": ["a"]}

    def test_problems_are_logged(self, checker: FilterCompatibilityChecker) -> None:
        with capture_logs() as logs:
            checker.check(_f("Label"), DESCRIBE)
        assert logs[0]["event"] == "parameter_filter.incompatible"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["operation"] == "DescribeParameters"

    def test_check_all_aggregates(self, checker: FilterCompatibilityChecker) -> None:
        problems = checker.check_all([_f("Name"), _f("Path"), _f("Label")], BY_PATH)
        assert len(problems) == 2

    def test_unknown_operation_raises_value_error(self, checker: FilterCompatibilityChecker) -> None:
        with pytest.raises(ValueError):
            checker.check(_f("Name"), "PutParameter")
