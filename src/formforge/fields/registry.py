"""Field type registry for FormForge.

Maps the short type names used in form descriptions (``"Text"``,
``"SelectMany"``) to field classes. The catalog is populated explicitly at
startup, so resolving a type never touches the filesystem.
"""

import importlib
import logging
import threading

from formforge.core.errors import UnknownFieldError
from formforge.fields.base import Field

logger = logging.getLogger(__name__)


class FieldRegistry:
    """Registry of field classes keyed by type name.

    Registries are ordinary objects so tests and applications can build
    their own; parse functions fall back to :func:`get_default_registry`
    when none is passed.

    Example:
        registry = FieldRegistry()
        register_builtin_fields(registry)
        registry.register(StarRating)

        field_class = registry.get("StarRating")
    """

    def __init__(self) -> None:
        self._fields: dict[str, type[Field]] = {}
        self._lock = threading.Lock()

    def register(self, field_class: type[Field], name: str | None = None) -> None:
        """Register a field class.

        Idempotent - re-registering a name is a no-op.

        Args:
            field_class: A Field subclass
            name: Type name (defaults to the class' ``kind``)
        """
        if not (isinstance(field_class, type) and issubclass(field_class, Field)):
            raise TypeError(f"{field_class!r} is not a Field subclass")
        name = name or field_class.kind
        with self._lock:
            if name in self._fields:
                return  # Already registered, no-op
            self._fields[name] = field_class
        logger.debug("Registered field type %s -> %s", name, field_class.__qualname__)

    def get(self, name: str) -> type[Field]:
        """Resolve a type name to a field class.

        Short names are looked up in the catalog. A dotted ``module.Class``
        path is imported on first use and remembered under that path.

        Raises:
            UnknownFieldError: If the name cannot be resolved
        """
        field_class = self._fields.get(name)
        if field_class is not None:
            return field_class
        if "." in name:
            field_class = self._import(name)
            self.register(field_class, name)
            return field_class
        raise UnknownFieldError(
            f"Field type '{name}' is not registered. "
            "Available types: " + ", ".join(self.list_registered())
        )

    def _import(self, path: str) -> type[Field]:
        module_name, _, class_name = path.rpartition(".")
        if "" in path.split("."):
            raise UnknownFieldError(f"'{path}' is not a module.Class path")
        try:
            module = importlib.import_module(module_name)
            field_class = getattr(module, class_name)
        except (ImportError, AttributeError) as exc:
            raise UnknownFieldError(f"Unable to import field type '{path}'") from exc
        if not (isinstance(field_class, type) and issubclass(field_class, Field)):
            raise UnknownFieldError(f"'{path}' is not a Field subclass")
        logger.debug("Resolved field type %s by import", path)
        return field_class

    def is_registered(self, name: str) -> bool:
        """Check if a type name is registered."""
        return name in self._fields

    def list_registered(self) -> list[str]:
        """List all registered type names."""
        return sorted(self._fields)

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        with self._lock:
            self._fields.clear()


def register_builtin_fields(registry: FieldRegistry) -> None:
    """Register every field type that ships with FormForge."""
    from formforge.fields.buttons import Button, ResetButton, SubmitButton
    from formforge.fields.elements import Hidden, Note
    from formforge.fields.entries import File, Honeypot, Number, Password, Text, TextArea
    from formforge.fields.selections import SelectMany, SelectOne, SelectOneWithOther

    for field_class in (
        Text,
        Password,
        Number,
        File,
        Honeypot,
        TextArea,
        Hidden,
        Note,
        SelectOne,
        SelectMany,
        SelectOneWithOther,
        Button,
        SubmitButton,
        ResetButton,
    ):
        registry.register(field_class)


_default_registry: FieldRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> FieldRegistry:
    """Get the process-wide registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                registry = FieldRegistry()
                register_builtin_fields(registry)
                _default_registry = registry
    return _default_registry
