"""Unit tests for the keyword-matching fallback interpreter."""
import pytest

from order_assistant.services.interpreter.fallback import (
    NO_MATCH_MESSAGE,
    NO_MATCH_QUESTION,
    KeywordOrderInterpreter,
)
from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.menu.in_memory_menu import InMemoryMenuProvider

CATALOG = MenuCatalog(InMemoryMenuProvider())


@pytest.fixture
def fallback(menu_catalog):
    return KeywordOrderInterpreter(menu_catalog, tax_rate=0.08875)


class TestKeywordFallback:
    """Test deterministic order building."""

    def test_tavern_pie(self, fallback):
        """Test a single match is priced with flat tax."""
        result = fallback.interpret("tavern pie")

        items = [item.model_dump(exclude_none=True) for item in result.order.items]
        assert items == [{"id": "tavern", "name": "Tavern Pie", "quantity": 1, "price": 28.0}]
        assert result.order.subtotal == 28.0
        assert result.order.taxes == 2.48
        assert result.order.total == 30.48
        assert result.order.fees is None
        assert result.requires_clarification is None
        assert result.assistant_message == "I matched that to 1 Tavern Pie. Let me know if that's right!"

    def test_no_match(self, fallback):
        """Test unknown requests ask which menu item was meant."""
        result = fallback.interpret("surprise me")

        assert result.order is None
        assert result.requires_clarification is True
        assert result.clarifications == [NO_MATCH_QUESTION]
        assert result.clarifications == ["Which pizza from the menu should I grab for you?"]
        assert result.assistant_message == NO_MATCH_MESSAGE

    def test_no_match_silent(self, fallback):
        result = fallback.interpret("surprise me", silent=True)

        assert result.assistant_message == ""
        assert result.requires_clarification is True

    def test_match_silent_keeps_confirmation(self, fallback):
        result = fallback.interpret("caesar salad please", silent=True)

        assert result.order.items[0].id == "caesar"
        assert result.assistant_message

    @pytest.mark.parametrize("item", list(CATALOG.iter_items()), ids=lambda item: item.id)
    def test_every_item_name_matches(self, fallback, item):
        """Test each catalog name alone yields that item at catalog price."""
        result = fallback.interpret(item.name.lower())

        matched = {line.id: line for line in result.order.items}
        assert item.id in matched
        assert matched[item.id].quantity == 1
        assert matched[item.id].price == item.price

    def test_case_insensitive(self, fallback):
        result = fallback.interpret("One BROOKLYN BRIDGE!")
        assert [item.id for item in result.order.items] == ["brooklyn"]

    def test_id_match(self, fallback):
        result = fallback.interpret("the grandma-slice")
        assert [item.id for item in result.order.items] == ["grandma-slice"]

    def test_multiple_matches_in_catalog_order(self, fallback):
        """Test every matched item is included once at quantity 1."""
        result = fallback.interpret("house meatballs and two tomato pies and meatballs")

        assert [item.id for item in result.order.items] == ["tomato", "meatballs"]
        assert all(item.quantity == 1 for item in result.order.items)
        assert result.order.subtotal == 42.0
        assert result.order.taxes == round(42.0 * 0.08875, 2)
        assert result.order.total == round(result.order.subtotal + result.order.taxes, 2)

    def test_tax_matches_rate(self, fallback):
        for utterance in ["tomato pie", "green room", "tavern slice", "caesar salad"]:
            order = fallback.interpret(utterance).order
            assert order.taxes == round(order.subtotal * 0.08875, 2)
            assert order.total == round(order.subtotal + order.taxes, 2)

    def test_configured_tax_and_fee(self, menu_catalog):
        """Test tax rate and delivery fee come from configuration."""
        fallback = KeywordOrderInterpreter(menu_catalog, tax_rate=0.1, delivery_fee=3.5)

        order = fallback.interpret("caesar salad").order

        assert order.taxes == 1.4
        assert order.fees == 3.5
        assert order.total == 18.9
