"""Unit tests for model output validation."""
import json
import pytest

from order_assistant.services.interpreter.llm import ModelOutputError
from order_assistant.services.interpreter.parser import parse_model_output


def _payload(**overrides):
    payload = {
        "assistantMessage": "Two tavern pies coming up!",
        "order": {
            "items": [{"id": "tavern", "name": "Tavern Pie", "quantity": 2, "price": 28}],
            "subtotal": 56,
            "taxes": 4.97,
            "total": 60.97,
            "specialInstructions": "well done",
        },
    }
    payload.update(overrides)
    return json.dumps(payload)


class TestParseModelOutput:
    """Test schema validation of model JSON."""

    def test_valid_order(self):
        result = parse_model_output(_payload())

        assert result.assistant_message == "Two tavern pies coming up!"
        assert result.order.items[0].id == "tavern"
        assert result.order.items[0].quantity == 2
        assert result.order.items[0].price == 28.0
        assert result.order.special_instructions == "well done"
        assert result.order.fees is None

    def test_clarification_only(self):
        raw = json.dumps({
            "assistantMessage": "Which size?",
            "requiresClarification": True,
            "clarifications": ["Pie or slice?"],
        })

        result = parse_model_output(raw)

        assert result.requires_clarification is True
        assert result.clarifications == ["Pie or slice?"]
        assert result.order is None

    def test_unknown_keys_ignored(self):
        result = parse_model_output(_payload(mood="cheerful"))
        assert result.assistant_message

    def test_serializes_camel_case(self):
        result = parse_model_output(_payload())
        dumped = result.model_dump(by_alias=True, exclude_none=True)

        assert "assistantMessage" in dumped
        assert dumped["order"]["specialInstructions"] == "well done"

    def test_not_json(self):
        raw = "Sure! One tavern pie."

        with pytest.raises(ModelOutputError) as exc_info:
            parse_model_output(raw)
        assert exc_info.value.raw_text == raw

    def test_missing_assistant_message(self):
        with pytest.raises(ModelOutputError):
            parse_model_output(json.dumps({"requiresClarification": True}))

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2"])
    def test_invalid_quantity(self, quantity):
        """Test quantities must be positive integers."""
        raw = _payload(order={"items": [{"id": "tavern", "name": "Tavern Pie", "quantity": quantity}]})

        with pytest.raises(ModelOutputError):
            parse_model_output(raw)

    def test_whole_number_float_quantity(self):
        """Test a quantity written as 2.0 is read as two items."""
        raw = _payload(order={"items": [{"id": "tavern", "name": "Tavern Pie", "quantity": 2.0}]})

        result = parse_model_output(raw)

        assert result.order.items[0].quantity == 2
        assert isinstance(result.order.items[0].quantity, int)

    def test_item_missing_id(self):
        raw = _payload(order={"items": [{"name": "Tavern Pie", "quantity": 1}]})

        with pytest.raises(ModelOutputError):
            parse_model_output(raw)

    def test_empty_items(self):
        """Test an order proposal must contain at least one item."""
        with pytest.raises(ModelOutputError):
            parse_model_output(_payload(order={"items": []}))

    def test_wrong_types(self):
        with pytest.raises(ModelOutputError):
            parse_model_output(_payload(clarifications="which one?"))
        with pytest.raises(ModelOutputError):
            parse_model_output(_payload(requiresClarification="yes"))
