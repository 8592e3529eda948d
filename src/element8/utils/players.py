from __future__ import annotations

from esper import World

from element8.components.character import CharacterProfile


def profile_of(world: World, entity: int) -> CharacterProfile:
    return world.component_for_entity(entity, CharacterProfile)


def display_name(world: World, entity: int) -> str:
    try:
        return profile_of(world, entity).display_name
    except KeyError:
        return f"Player {entity}"
