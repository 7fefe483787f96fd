from __future__ import annotations

import importlib
from typing import Any, Mapping


def load_object(dotted: str) -> Any:
    """
    Resolve ``pkg.mod:Attr.Path`` or ``pkg.mod.Attr`` to the named object.

    The colon form allows nested attributes after the module path.
    """
    if ":" in dotted:
        mod_name, attr_path = dotted.split(":", 1)
    else:
        mod_name, _, attr_path = dotted.rpartition(".")
    if not mod_name or not attr_path:
        raise ValueError(f"Not a dotted object path: {dotted!r}")

    obj: Any = importlib.import_module(mod_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ImportError(f"{dotted!r}: no attribute {part!r} in {obj!r}") from None
    return obj


def build_from_config(entry: Mapping[str, Any]) -> Any:
    """Instantiate ``entry["impl"]`` passing the entry itself as its config."""

    impl = entry.get("impl")
    if not impl:
        raise ValueError(f"Config entry has no 'impl': {sorted(entry)}")
    factory = load_object(impl)
    if not callable(factory):
        raise TypeError(f"{impl!r} is not callable")
    return factory(entry)
