"""Named directory of formatter factories."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from marid.exceptions import UnknownFormatError
from marid.formatter.base import DEFAULT_FORMAT, Formatter, FormatterFactory
from marid.formatter.markdown import MarkdownFormatter
from marid.formatter.mermaid import MermaidFormatter
from marid.formatter.yaml_formatter import YamlFormatter

__all__ = ["FormatterRegistry", "BUILTIN_FORMATTERS", "default_registry"]


class FormatterRegistry:
    """
    Maps format names to formatter factories.

    Registration is expected once, while wiring the application. Lookups may
    run concurrently from several threads; one lock guards both paths.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._factories: dict[str, FormatterFactory] = {}

    def register(self, name: str, factory: FormatterFactory) -> None:
        """Add a formatter factory under name.

        Raises:
            ValueError: If name is empty or already registered.
            TypeError: If factory is None or not callable.
        """
        if not name:
            raise ValueError("formatter name cannot be empty")
        if factory is None or not callable(factory):
            raise TypeError(f"formatter factory for {name!r} must be callable")

        with self._lock:
            if name in self._factories:
                raise ValueError(f"formatter {name!r} is already registered")
            self._factories[name] = factory

    def get(self, name: Optional[str] = None) -> Formatter:
        """Build a formatter by name, using DEFAULT_FORMAT when name is empty.

        Raises:
            UnknownFormatError: If no formatter is registered under name.
        """
        format_name = name or DEFAULT_FORMAT

        with self._lock:
            factory = self._factories.get(format_name)
        if factory is None:
            raise UnknownFormatError(format_name, self.available())

        return factory()

    def available(self) -> list[str]:
        """Return registered format names in sorted order."""
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


BUILTIN_FORMATTERS: list[tuple[str, FormatterFactory]] = [
    (MermaidFormatter.name, MermaidFormatter),
    (MarkdownFormatter.name, MarkdownFormatter),
    (YamlFormatter.name, YamlFormatter),
]


def default_registry(
    extra: Iterable[tuple[str, FormatterFactory]] = (),
) -> FormatterRegistry:
    """Create a registry holding the built-in formatters plus any extras."""
    registry = FormatterRegistry()
    for name, factory in [*BUILTIN_FORMATTERS, *extra]:
        registry.register(name, factory)
    return registry
