from element8.components.character import CharacterProfile, Element


def create_character_water() -> CharacterProfile:
    return CharacterProfile(
        key="water",
        display_name="Water",
        description="Adaptive and protective. Offers defensive bonuses in combat.",
        base_health=11,
        movement_modifier=0,
        attack_modifier=0,
        defense_modifier=1,
        heal_modifier=0,
        starting_corner_index=2,
        special_ability="Tide Guard: gain defensive advantage when adjacent to allies.",
        element=Element.WATER,
        color="blue",
        sprite_name="char_water",
    )
