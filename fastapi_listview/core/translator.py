"""Message translation with ICU-style placeholders.

Supports the subset of the ICU message syntax used by the widgets:

- ``{name}`` substitutes a parameter,
- ``{name, number}`` formats a number with thousands separators,
- ``{name, plural, =0{none} one{# item} other{# items}}`` picks a plural form,
  where ``#`` stands for the formatted number,
- ``{name, select, male{he} other{they}}`` picks a form by value.

Placeholders whose parameter is missing are left untouched.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

PluralRule = Callable[[Any], str]


def english_plural(number: Any) -> str:
    """Return the CLDR plural category for English."""
    return "one" if number == 1 else "other"


class Translator(Protocol):
    """Anything able to translate and format a message."""

    def translate(
        self, message: str, params: Mapping[str, Any] | None = None, category: str = "app"
    ) -> str:
        ...


class MessageFormatter:
    """Format ICU-style message patterns."""

    def __init__(self, plural_rule: PluralRule = english_plural) -> None:
        self.plural_rule = plural_rule

    def format(self, pattern: str, params: Mapping[str, Any]) -> str:
        """Return pattern with every known placeholder substituted."""
        return self._format(pattern, params, None)

    def _format(self, pattern: str, params: Mapping[str, Any], number: Any) -> str:
        parts: list[str] = []
        index = 0
        length = len(pattern)
        while index < length:
            char = pattern[index]
            if char == "{":
                end = self._find_closing(pattern, index)
                if end == -1:
                    parts.append(pattern[index:])
                    break
                parts.append(self._format_argument(pattern[index + 1 : end], params))
                index = end + 1
            elif char == "#" and number is not None:
                parts.append(self._format_number(number))
                index += 1
            else:
                parts.append(char)
                index += 1
        return "".join(parts)

    def _find_closing(self, pattern: str, start: int) -> int:
        depth = 0
        for position in range(start, len(pattern)):
            if pattern[position] == "{":
                depth += 1
            elif pattern[position] == "}":
                depth -= 1
                if depth == 0:
                    return position
        return -1

    def _format_argument(self, body: str, params: Mapping[str, Any]) -> str:
        parts = body.split(",", 2)
        name = parts[0].strip()
        if name not in params:
            return "{" + body + "}"
        value = params[name]
        if len(parts) == 1:
            return str(value)
        kind = parts[1].strip()
        style = parts[2] if len(parts) > 2 else ""
        if kind == "number":
            return self._format_number(value)
        if kind == "plural":
            return self._format_plural(value, style, params)
        if kind == "select":
            options = self._parse_options(style)
            message = options.get(str(value), options.get("other", ""))
            return self._format(message, params, None)
        return str(value)

    def _format_plural(self, value: Any, style: str, params: Mapping[str, Any]) -> str:
        options = self._parse_options(style)
        exact = f"={value}"
        if exact in options:
            message = options[exact]
        else:
            message = options.get(self.plural_rule(value), options.get("other", ""))
        return self._format(message, params, value)

    def _parse_options(self, style: str) -> dict[str, str]:
        options: dict[str, str] = {}
        index = 0
        while index < len(style):
            brace = style.find("{", index)
            if brace == -1:
                break
            selector = style[index:brace].strip()
            end = self._find_closing(style, brace)
            if end == -1:
                break
            options[selector] = style[brace + 1 : end]
            index = end + 1
        return options

    def _format_number(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return str(value)
        return f"{value:,}"


class MessageTranslator:
    """Translate messages from in-memory catalogs, then format them.

    ``messages`` maps a category to a catalog of source message to translated
    message. Messages without a translation are formatted as given.
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, str]] | None = None,
        *,
        formatter: MessageFormatter | None = None,
    ) -> None:
        self.messages = {category: dict(catalog) for category, catalog in (messages or {}).items()}
        self.formatter = formatter or MessageFormatter()

    def translate(
        self, message: str, params: Mapping[str, Any] | None = None, category: str = "app"
    ) -> str:
        """Return the translated message with params substituted."""
        translated = self.messages.get(category, {}).get(message, message)
        return self.formatter.format(translated, params or {})
