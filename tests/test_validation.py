# tests/test_validation.py
#
# Tests for argument validation: every declared argument is a required,
# non-empty string.

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gateway.catalog import list_operations, operations_by_name
from gateway.errors import ArgumentValidationError
from gateway.validation import remote_params, validate_arguments


def _valid_arguments(operation) -> dict:
    return {field: f"{field}-value" for field in operation.arguments.model_fields}


class TestValidArguments:

    @pytest.mark.parametrize("operation", list_operations(), ids=lambda op: op.name)
    def test_complete_arguments_pass(self, operation):
        validated = validate_arguments(operation, _valid_arguments(operation))
        assert remote_params(validated) == _valid_arguments(operation)

    def test_extra_arguments_are_dropped(self):
        """Unknown keys never reach Apps Script."""
        op = operations_by_name()["get_message"]
        validated = validate_arguments(op, {"messageId": "m1", "action": "deleteEverything"})
        assert remote_params(validated) == {"messageId": "m1"}

    def test_query_with_spaces_kept_verbatim(self):
        op = operations_by_name()["search_messages"]
        validated = validate_arguments(op, {"query": "from:alice subject:Q3 report"})
        assert remote_params(validated) == {"query": "from:alice subject:Q3 report"}


class TestInvalidArguments:

    @pytest.mark.parametrize("operation", list_operations(), ids=lambda op: op.name)
    def test_each_missing_argument_fails(self, operation):
        for field in operation.arguments.model_fields:
            arguments = _valid_arguments(operation)
            del arguments[field]
            with pytest.raises(ArgumentValidationError) as exc_info:
                validate_arguments(operation, arguments)
            assert field in str(exc_info.value)
            assert operation.name in str(exc_info.value)

    @pytest.mark.parametrize("operation", list_operations(), ids=lambda op: op.name)
    def test_each_empty_argument_fails(self, operation):
        for field in operation.arguments.model_fields:
            arguments = _valid_arguments(operation)
            arguments[field] = ""
            with pytest.raises(ArgumentValidationError, match=field):
                validate_arguments(operation, arguments)

    def test_wrong_type_fails(self):
        """Numbers are not silently turned into strings."""
        op = operations_by_name()["get_message"]
        with pytest.raises(ArgumentValidationError, match="messageId"):
            validate_arguments(op, {"messageId": 12345})

    def test_none_means_no_arguments(self):
        op = operations_by_name()["search_messages"]
        with pytest.raises(ArgumentValidationError, match="query"):
            validate_arguments(op, None)

    def test_non_mapping_arguments_fail(self):
        op = operations_by_name()["search_messages"]
        with pytest.raises(ArgumentValidationError):
            validate_arguments(op, ["query"])

    def test_all_bad_fields_are_reported(self):
        op = operations_by_name()["move_to_label"]
        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments(op, {"labelName": ""})
        message = str(exc_info.value)
        assert "messageId" in message
        assert "labelName" in message
