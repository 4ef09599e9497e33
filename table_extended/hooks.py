# table_extended/hooks.py
"""
Named filter hooks.

A filter is an ordered list of callables that each receive the current value
(plus any extra arguments) and return the new value, the same way the content
postprocessors run one after another. Callbacks with a lower priority run
first; equal priorities keep connection order.

Usage:
    from table_extended import hooks

    def add_button_class(classes):
        return classes + ["button"]

    hooks.cta_classes.connect(add_button_class)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Filter:
    def __init__(self, name: str):
        self.name = name
        self._callbacks: list[tuple[int, int, Callable[..., Any]]] = []
        self._counter = 0

    def connect(self, func: Callable[..., Any], priority: int = 10) -> Callable[..., Any]:
        """Add ``func`` to the filter. Returns ``func`` so it works as a decorator."""
        self._counter += 1
        self._callbacks.append((priority, self._counter, func))
        self._callbacks.sort(key=lambda item: (item[0], item[1]))
        return func

    def disconnect(self, func: Callable[..., Any]) -> bool:
        """Remove every registration of ``func``. Returns True if any was removed."""
        before = len(self._callbacks)
        self._callbacks = [item for item in self._callbacks if item[2] is not func]
        return len(self._callbacks) != before

    def has_callbacks(self) -> bool:
        return bool(self._callbacks)

    def apply(self, value: Any, *args: Any) -> Any:
        """Run ``value`` through every connected callback in order."""
        for _, _, func in self._callbacks:
            value = func(value, *args)
        return value

    def __repr__(self) -> str:
        return f"<Filter {self.name!r} callbacks={len(self._callbacks)}>"


# (atts, tag, content) -> atts
shortcode_atts = Filter("shortcode_atts")

# (classes) -> classes
cta_classes = Filter("cta_classes")

# (rel_parts, newtab, nofollow, sponsored) -> rel_parts
cta_rel = Filter("cta_rel")

# (definitions) -> definitions
shortcodes = Filter("shortcodes")
