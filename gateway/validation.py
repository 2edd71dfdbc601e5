# gateway/validation.py
#
# Checks a tool call's arguments against the operation's pydantic model
# BEFORE anything is sent to Apps Script. A bad call never reaches the
# network.

from pydantic import BaseModel, ValidationError

from gateway.errors import ArgumentValidationError


def describe_errors(error: ValidationError) -> str:
    """
    Flatten pydantic's error list into one readable line.

    Example: "messageId: Field required; labelName: String should have at least 1 character"
    """
    parts = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "arguments"
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)


def validate_arguments(operation, arguments) -> BaseModel:
    """
    Validate raw tool-call arguments for one operation.

    Args:
        operation: The catalog entry being called
        arguments: Whatever the client sent (None is treated as no arguments)

    Returns:
        An instance of the operation's argument model.

    Raises:
        ArgumentValidationError: Naming the operation and every bad field.
    """
    if arguments is None:
        arguments = {}

    try:
        return operation.arguments.model_validate(arguments)
    except ValidationError as e:
        raise ArgumentValidationError(
            f"Invalid arguments for {operation.name}: {describe_errors(e)}"
        ) from e


def remote_params(validated: BaseModel) -> dict[str, str]:
    """The validated arguments as Apps Script query parameters."""
    return validated.model_dump()
