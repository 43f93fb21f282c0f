"""Model output validation."""
from pydantic import ValidationError
from order_assistant.services.interpreter.llm import ModelOutputError
from order_assistant.services.ordering.models import InterpretationResult


def parse_model_output(raw_text: str) -> InterpretationResult:
    """
    Parse and validate the model's JSON against the result schema.

    Any decode error or schema mismatch is reported as a whole; partially
    valid output is never accepted.

    Raises:
        ModelOutputError: the text is not a valid InterpretationResult
    """
    try:
        return InterpretationResult.model_validate_json(raw_text, strict=True)
    except ValidationError as e:
        raise ModelOutputError(
            f"Model output failed validation ({e.error_count()} errors)", raw_text
        ) from e
