from server.errors import ToolValidationError


def test_tool_validation_error_is_value_error():
    assert issubclass(ToolValidationError, ValueError)
