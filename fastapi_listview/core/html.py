"""HTML tag construction helpers."""

from __future__ import annotations

import json
from html import escape
from typing import Any, Mapping

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

DATA_ATTRIBUTES = ("data", "aria")

# Attributes rendered first, in this order; the rest keep insertion order.
ATTRIBUTE_ORDER = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "src",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)


class HtmlBuilder:
    """Build HTML tags from a name, content and an attribute mapping.

    Attribute values are rendered as follows:

    - ``True`` renders the bare attribute name, ``False`` and ``None`` skip it.
    - ``class`` accepts a list of names joined with spaces.
    - ``data``/``aria`` accept a mapping expanded into ``data-<key>`` attributes.
    - Any other value is converted to ``str`` and escaped.

    Attributes listed in ``ATTRIBUTE_ORDER`` come first so output is stable
    regardless of how option mappings were assembled. The special option
    ``encode`` controls whether the tag content is escaped.
    """

    def encode(self, content: Any) -> str:
        """Return content escaped for use in HTML text and attribute values."""
        return escape("" if content is None else str(content), quote=True)

    def render_tag_attributes(self, attributes: Mapping[str, Any] | None) -> str:
        """Render an attribute mapping as a string with a leading space."""
        if not attributes:
            return ""
        ordered = {name: attributes[name] for name in ATTRIBUTE_ORDER if name in attributes}
        ordered.update((name, value) for name, value in attributes.items() if name not in ordered)
        rendered: list[str] = []
        for name, value in ordered.items():
            if value is None or value is False:
                continue
            if value is True:
                rendered.append(f" {name}")
            elif name in DATA_ATTRIBUTES and isinstance(value, Mapping):
                for key, item in value.items():
                    if item is None or item is False:
                        continue
                    if item is True:
                        rendered.append(f" {name}-{key}")
                    elif isinstance(item, (list, dict)):
                        rendered.append(f" {name}-{key}='{self.encode(json.dumps(item))}'")
                    else:
                        rendered.append(f' {name}-{key}="{self.encode(item)}"')
            elif name == "class" and isinstance(value, (list, tuple)):
                if value:
                    rendered.append(f' class="{self.encode(" ".join(value))}"')
            elif isinstance(value, (list, tuple, dict)):
                rendered.append(f" {name}='{self.encode(json.dumps(value))}'")
            else:
                rendered.append(f' {name}="{self.encode(value)}"')
        return "".join(rendered)

    def begin_tag(self, name: str, options: Mapping[str, Any] | None = None) -> str:
        """Return an opening tag."""
        attributes = dict(options or {})
        attributes.pop("encode", None)
        return f"<{name}{self.render_tag_attributes(attributes)}>"

    def end_tag(self, name: str) -> str:
        """Return a closing tag."""
        return f"</{name}>"

    def tag(
        self,
        name: str,
        content: Any = "",
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Return a complete tag, escaping content only when ``encode`` is set."""
        attributes = dict(options or {})
        encode = attributes.pop("encode", False)
        if name.lower() in VOID_ELEMENTS:
            return f"<{name}{self.render_tag_attributes(attributes)}>"
        text = self.encode(content) if encode else ("" if content is None else str(content))
        return f"<{name}{self.render_tag_attributes(attributes)}>{text}</{name}>"

    def a(
        self,
        text: Any,
        url: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Return an anchor tag; ``href`` is omitted when url is None."""
        attributes = dict(options or {})
        if url is not None:
            attributes["href"] = url
        return self.tag("a", text, attributes)

    def add_css_class(self, options: Mapping[str, Any], css_class: str) -> dict[str, Any]:
        """Return a copy of options with css_class appended to ``class``."""
        updated = dict(options)
        existing = updated.get("class")
        if not existing:
            updated["class"] = css_class
            return updated
        if isinstance(existing, (list, tuple)):
            names = list(existing)
        else:
            names = str(existing).split()
        for name in css_class.split():
            if name not in names:
                names.append(name)
        updated["class"] = " ".join(names)
        return updated
