"""Tests for workflow AST assertions."""

import pytest

from resolver_conformance.assertions import structural
from resolver_conformance.testing.models import Assertion


AST = {
    "name": "Convert Currency",
    "allowedResolvers": ["fetchRate", "convertAmount"],
    "steps": [
        {"type": "action", "saveAs": "rate", "failurePolicies": {"RATE_UNAVAILABLE": {"action": "retry", "count": 2}}},
        {"type": "action", "saveAs": "converted"},
    ],
    "returnValues": ["converted"],
}


def make_assertion(kind: str, **fields) -> Assertion:
    return Assertion.model_validate({"id": f"A-{kind}", "type": kind, **fields})


class TestAllowlist:
    def test_exact_match_passes(self):
        a = make_assertion("allowed_resolvers_listed", expected=["convertAmount", "fetchRate"])
        assert structural.check_allowlist(AST, a, {}) is True

    def test_extra_declared_resolver_fails(self):
        a = make_assertion("allowed_resolvers_listed", expected=["fetchRate"])
        assert structural.check_allowlist(AST, a, {}) is False

    def test_missing_expected_resolver_fails(self):
        a = make_assertion("allowed_resolvers_listed", expected=["fetchRate", "convertAmount", "notify"])
        assert structural.check_allowlist(AST, a, {}) is False

    def test_same_size_different_members_fails(self):
        a = make_assertion("allowed_resolvers_listed", expected=["fetchRate", "notify"])
        assert structural.check_allowlist(AST, a, {}) is False

    def test_absent_allowlist_matches_empty_expectation(self):
        a = make_assertion("allowed_resolvers_listed", expected=[])
        assert structural.check_allowlist({}, a, {}) is True

    def test_non_list_allowlist_fails(self):
        a = make_assertion("allowed_resolvers_listed", expected=["fetchRate"])
        assert structural.check_allowlist({"allowedResolvers": "fetchRate"}, a, {}) is False


class TestResolverNames:
    def test_alphanumeric_names_pass(self):
        a = make_assertion("resolver_names_normalized")
        assert structural.check_resolver_name_normalization(AST, a, {}) is True

    @pytest.mark.parametrize("name", ["fetch_rate", "fetch-rate", "1fetch", "", "fetch rate"])
    def test_irregular_names_fail(self, name):
        a = make_assertion("resolver_names_normalized")
        ast = {"allowedResolvers": ["fetchRate", name]}
        assert structural.check_resolver_name_normalization(ast, a, {}) is False

    def test_non_string_name_fails(self):
        a = make_assertion("resolver_names_normalized")
        assert structural.check_resolver_name_normalization({"allowedResolvers": [42]}, a, {}) is False


class TestWorkflowFields:
    def test_name(self):
        assert structural.check_workflow_name(AST, make_assertion("workflow_name_present", expected="Convert Currency"), {})
        assert not structural.check_workflow_name(AST, make_assertion("workflow_name_present", expected="Other"), {})

    def test_return_values(self):
        assert structural.check_return_values(AST, make_assertion("workflow_return_values", expected=["converted"]), {})
        assert not structural.check_return_values(AST, make_assertion("workflow_return_values", expected=[]), {})

    def test_return_values_empty(self):
        a = make_assertion("workflow_return_values_empty", expected=[])
        assert structural.check_return_values({"returnValues": []}, a, {}) is True
        assert structural.check_return_values({}, a, {}) is True


class TestSteps:
    def test_step_type_and_save_as(self):
        assert structural.check_step_type(AST, make_assertion("step_type", stepIndex=0, expected="action"), {})
        assert structural.check_step_save_as(AST, make_assertion("step_saveas", stepIndex=1, expected="converted"), {})
        assert not structural.check_step_save_as(AST, make_assertion("step_saveas", stepIndex=1, expected="rate"), {})

    def test_out_of_range_index_is_failure_not_error(self):
        assert structural.check_step_type(AST, make_assertion("step_type", stepIndex=7, expected="action"), {}) is False
        assert structural.check_step_type(AST, make_assertion("step_type", stepIndex=-1, expected="action"), {}) is False

    def test_missing_index_fails(self):
        assert structural.check_step_type(AST, make_assertion("step_type", expected="action"), {}) is False

    def test_failure_policies_match(self):
        a = make_assertion(
            "step_failure_policies",
            stepIndex=0,
            expected={"RATE_UNAVAILABLE": {"action": "retry", "count": 2}},
        )
        assert structural.check_step_failure_policies(AST, a, {}) is True

    def test_failure_policies_count_mismatch(self):
        a = make_assertion(
            "step_failure_policies",
            stepIndex=0,
            expected={"RATE_UNAVAILABLE": {"action": "retry", "count": 3}},
        )
        assert structural.check_step_failure_policies(AST, a, {}) is False

    def test_failure_policies_unknown_code(self):
        a = make_assertion("step_failure_policies", stepIndex=0, expected={"TIMEOUT": {"action": "abort"}})
        assert structural.check_step_failure_policies(AST, a, {}) is False

    def test_step_without_policies(self):
        a = make_assertion("step_failure_policies", stepIndex=1, expected={})
        assert structural.check_step_failure_policies(AST, a, {}) is False


class TestWarnings:
    STATUS = {"__warnings": ["Unknown resolver 'sendEmail'", {"message": "Step 3: missing Save as"}]}

    def test_no_parse_warnings_defaults_to_zero(self):
        a = make_assertion("no_parse_warnings")
        assert structural.check_no_warnings(AST, a, {"__warnings": []}) is True
        assert structural.check_no_warnings(AST, a, {}) is True
        assert structural.check_no_warnings(AST, a, self.STATUS) is False

    def test_no_parse_warnings_with_expected_count(self):
        a = make_assertion("no_parse_warnings", expected=2)
        assert structural.check_no_warnings(AST, a, self.STATUS) is True

    def test_contains_warning_is_case_insensitive(self):
        a = make_assertion("contains_warning", expected_substring="UNKNOWN RESOLVER")
        assert structural.check_contains_warning(AST, a, self.STATUS) is True

    def test_contains_warning_reads_message_objects(self):
        a = make_assertion("contains_warning", expected_substring="save as")
        assert structural.check_contains_warning(AST, a, self.STATUS) is True

    def test_contains_warning_absent(self):
        a = make_assertion("contains_warning", expected_substring="timeout")
        assert structural.check_contains_warning(AST, a, self.STATUS) is False

    def test_status_greater_than(self):
        a = make_assertion("status_greater_than", path="__warnings.length", expected=1)
        assert structural.check_status_greater_than(AST, a, self.STATUS) is True
        a = make_assertion("status_greater_than", path="__warnings.length", expected=2)
        assert structural.check_status_greater_than(AST, a, self.STATUS) is False

    def test_status_greater_than_missing_path(self):
        a = make_assertion("status_greater_than", path="errors.count", expected=0)
        assert structural.check_status_greater_than(AST, a, self.STATUS) is False

    def test_status_greater_than_ignores_booleans(self):
        a = make_assertion("status_greater_than", path="flag", expected=0)
        assert structural.check_status_greater_than(AST, a, {"flag": True}) is False

    def test_status_greater_than_malformed_path(self):
        a = make_assertion("status_greater_than", path="__warnings..length", expected=0)
        assert structural.check_status_greater_than(AST, a, self.STATUS) is False
