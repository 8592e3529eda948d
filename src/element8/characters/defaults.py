from __future__ import annotations

import importlib
import pkgutil
from typing import Callable, Dict, Iterable, cast

from element8.characters.registry import CharacterRegistry
from element8.components.character import CharacterProfile

CharacterFactory = Callable[[], CharacterProfile]


def _discover_character_factories() -> Dict[str, CharacterFactory]:
    builders: Dict[str, CharacterFactory] = {}
    package_name = "element8.factories.characters"
    package = importlib.import_module(package_name)
    for module in _iter_modules(package_name, package):
        for attr_name in dir(module):
            if not attr_name.startswith("create_character_"):
                continue
            factory = getattr(module, attr_name)
            if callable(factory):
                key = attr_name[len("create_character_") :]
                builders.setdefault(key, cast(CharacterFactory, factory))
    return builders


def _iter_modules(package_name: str, package) -> Iterable:
    yield package
    package_path = getattr(package, "__path__", None)
    if not package_path:
        return
    for module_info in pkgutil.iter_modules(package_path):
        if module_info.name.startswith("__"):
            continue
        yield importlib.import_module(f"{package_name}.{module_info.name}")


def create_default_registry() -> CharacterRegistry:
    """Return a new registry holding every built-in character."""

    registry = CharacterRegistry()
    factories = _discover_character_factories()
    for key in sorted(factories):
        registry.register(factories[key]())
    return registry


def default_character_keys() -> tuple[str, ...]:
    return tuple(sorted(_discover_character_factories()))
