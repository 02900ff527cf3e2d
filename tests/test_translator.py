"""Tests for message formatting and translation."""

from fastapi_listview.core.translator import MessageFormatter, MessageTranslator
from fastapi_listview.widgets.base_list_view import DEFAULT_SUMMARY


class TestMessageFormatter:
    """Tests for the ICU-style formatter."""

    def setup_method(self) -> None:
        self.formatter = MessageFormatter()

    def test_simple_placeholder(self) -> None:
        assert self.formatter.format("Hello {name}!", {"name": "Ann"}) == "Hello Ann!"

    def test_missing_placeholder_is_kept(self) -> None:
        assert self.formatter.format("Hello {name}!", {}) == "Hello {name}!"

    def test_number_uses_grouping(self) -> None:
        assert self.formatter.format("{n, number}", {"n": 1234567}) == "1,234,567"

    def test_plural_forms(self) -> None:
        pattern = "{n, plural, =0{no items} one{# item} other{# items}}"
        assert self.formatter.format(pattern, {"n": 0}) == "no items"
        assert self.formatter.format(pattern, {"n": 1}) == "1 item"
        assert self.formatter.format(pattern, {"n": 1500}) == "1,500 items"

    def test_select(self) -> None:
        pattern = "{kind, select, user{a user} other{something}}"
        assert self.formatter.format(pattern, {"kind": "user"}) == "a user"
        assert self.formatter.format(pattern, {"kind": "robot"}) == "something"

    def test_custom_plural_rule(self) -> None:
        formatter = MessageFormatter(plural_rule=lambda number: "few" if 2 <= number <= 4 else "other")
        pattern = "{n, plural, few{few} other{many}}"
        assert formatter.format(pattern, {"n": 3}) == "few"
        assert formatter.format(pattern, {"n": 7}) == "many"


class TestMessageTranslator:
    """Tests for catalog lookup."""

    def test_default_summary(self) -> None:
        translator = MessageTranslator()
        result = translator.translate(DEFAULT_SUMMARY, {"begin": 1, "end": 9, "totalCount": 9})
        assert result == "Showing <b>1-9</b> of <b>9</b> items"

    def test_single_item_summary(self) -> None:
        translator = MessageTranslator()
        result = translator.translate(DEFAULT_SUMMARY, {"begin": 1, "end": 1, "totalCount": 1})
        assert result == "Showing <b>1-1</b> of <b>1</b> item"

    def test_translation_from_catalog(self) -> None:
        translator = MessageTranslator(
            {"fastapi-listview": {"No results found.": "Keine Ergebnisse."}}
        )
        assert translator.translate("No results found.", category="fastapi-listview") == "Keine Ergebnisse."
        assert translator.translate("No results found.", category="other") == "No results found."
