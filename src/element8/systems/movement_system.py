from __future__ import annotations

import random

from esper import World

from element8.components.character import CharacterProfile
from element8.components.path_position import PathPosition
from element8.events.bus import EventBus, EVENT_DICE_ROLLED, EVENT_PLAYER_MOVED
from element8.systems.board_ops import get_board, step_along_path
from element8.utils.dice import roll_die
from element8.utils.game_state import current_player, get_game_state, get_rng, get_rules


class MovementSystem:
    """Rolls the movement die and walks the current player along the perimeter path."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or get_rng(world)

    def roll_dice(self) -> int:
        """Die face plus the current player's movement modifier; may be zero or negative."""

        owner = current_player(self.world)
        profile = self.world.component_for_entity(owner, CharacterProfile)
        face = roll_die(self._rng, get_rules(self.world).die_sides)
        total = face + profile.movement_modifier
        get_game_state(self.world).last_roll = total
        self.event_bus.emit(
            EVENT_DICE_ROLLED,
            owner_entity=owner,
            face=face,
            modifier=profile.movement_modifier,
            total=total,
        )
        return total

    def move_along_path(self, forward: bool, spaces: int, *, owner_entity: int | None = None) -> int:
        """Move ``spaces`` steps (clockwise when ``forward``) with wrap-around; returns the new index."""

        owner = owner_entity if owner_entity is not None else current_player(self.world)
        board = get_board(self.world)
        position = self.world.component_for_entity(owner, PathPosition)
        previous = position.path_index
        new_index = step_along_path(previous, forward, spaces, len(board.path))
        place_on_path(self.world, owner, new_index)
        self.event_bus.emit(
            EVENT_PLAYER_MOVED,
            owner_entity=owner,
            previous_index=previous,
            path_index=new_index,
            row=position.row,
            col=position.col,
            forward=forward,
            spaces=spaces,
        )
        return new_index


def place_on_path(world: World, entity: int, path_index: int) -> PathPosition:
    """Set ``entity``'s path index and refresh its derived grid coordinate."""

    path = get_board(world).path
    row, col = path[path_index]
    try:
        position = world.component_for_entity(entity, PathPosition)
    except KeyError:
        position = PathPosition(path_index=path_index, row=row, col=col)
        world.add_component(entity, position)
        return position
    position.path_index = path_index
    position.row = row
    position.col = col
    return position
