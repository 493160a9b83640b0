"""Model serialization: JSON round-trip for documentation models.

The hosting service receives models from the parser process as JSON.
Converts Package models to/from JSON-compatible dicts.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from dochtml.serialization import to_json, from_json

    payload = to_json(pkg)
    restored = from_json(payload)
    assert pkg == restored

Input Leniency:
    Missing keys take the dataclass defaults. Unknown keys are ignored.
    A ``null`` list or mapping reads as empty.
    A package without a ``role`` is read as a command when its name is
    ``main``, the upstream convention for entry-point modules.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from dochtml.errors import ModelError
from dochtml.location import SourceLocation
from dochtml.model import Code, Comment, Decl, Example, Func, ModuleRole, Note, Package, Type, Value

_Converter = Callable[[Any, str], Any]


def to_dict(pkg: Package) -> dict[str, Any]:
    """Convert a Package to a JSON-compatible dict.

    Args:
        pkg: Package model.

    Returns:
        Dict with all model fields; tuples become lists, enums their values.

    """
    return _serialize_value(pkg)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _serialize_value(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, Mapping):
        return {str(k): _serialize_value(v) for k, v in value.items()}
    # Primitives: str, int, bool, None
    return value


def _build(cls: type, data: Any, where: str) -> Any:
    """Construct cls from a dict, applying nested converters per field."""
    if not isinstance(data, dict):
        msg = f"{where}: expected object, got {type(data).__name__}"
        raise ModelError(msg)

    converters = _CONVERTERS.get(cls, {})
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        convert = converters.get(f.name)
        kwargs[f.name] = convert(raw, f"{where}.{f.name}") if convert else raw

    try:
        return cls(**kwargs)
    except TypeError as exc:
        msg = f"{where}: {exc}"
        raise ModelError(msg) from exc


def _one(cls: type) -> _Converter:
    def convert(raw: Any, where: str) -> Any:
        return _build(cls, raw, where)

    return convert


def _many(cls: type) -> _Converter:
    def convert(raw: Any, where: str) -> tuple[Any, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, list):
            msg = f"{where}: expected list, got {type(raw).__name__}"
            raise ModelError(msg)
        return tuple(_build(cls, item, f"{where}[{i}]") for i, item in enumerate(raw))

    return convert


def _strings(raw: Any, where: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
        msg = f"{where}: expected list of strings"
        raise ModelError(msg)
    return tuple(raw)


def _location(raw: Any, where: str) -> SourceLocation | None:
    if raw is None:
        return None
    return _build(SourceLocation, raw, where)


def _role(raw: Any, where: str) -> ModuleRole:
    try:
        return ModuleRole(raw)
    except ValueError as exc:
        msg = f"{where}: unknown role {raw!r}"
        raise ModelError(msg) from exc


def _notes(raw: Any, where: str) -> dict[str, tuple[Note, ...]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"{where}: expected object, got {type(raw).__name__}"
        raise ModelError(msg)
    notes = _many(Note)
    return {marker: notes(items, f"{where}.{marker}") for marker, items in raw.items()}


_CONVERTERS: dict[type, dict[str, _Converter]] = {
    Decl: {"location": _location},
    Code: {"location": _location},
    Comment: {"location": _location},
    Example: {"code": _one(Code), "comments": _many(Comment)},
    Value: {"names": _strings, "decl": _one(Decl)},
    Func: {"decl": _one(Decl), "examples": _many(Example)},
    Type: {
        "decl": _one(Decl),
        "consts": _many(Value),
        "vars": _many(Value),
        "funcs": _many(Func),
        "methods": _many(Func),
        "examples": _many(Example),
    },
    Package: {
        "role": _role,
        "consts": _many(Value),
        "vars": _many(Value),
        "funcs": _many(Func),
        "types": _many(Type),
        "examples": _many(Example),
        "notes": _notes,
    },
}


def from_dict(data: dict[str, Any]) -> Package:
    """Reconstruct a Package from a dict.

    Args:
        data: Dict as produced by to_dict (or by the upstream parser).

    Returns:
        Package model (frozen dataclasses throughout).

    Raises:
        ModelError: If the structure or a field value is malformed.

    """
    if isinstance(data, dict) and "role" not in data and data.get("name") == "main":
        data = {**data, "role": ModuleRole.COMMAND.value}
    return _build(Package, data, "package")


def to_json(pkg: Package, *, indent: int | None = None) -> str:
    """Serialize a Package to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        pkg: Package to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(pkg), sort_keys=True, indent=indent)


def from_json(data: str) -> Package:
    """Deserialize a Package from a JSON string.

    Raises:
        ModelError: If the JSON is invalid or doesn't describe a Package.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON: {exc}"
        raise ModelError(msg) from exc
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
