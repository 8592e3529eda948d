from element8.components.character import CharacterProfile


def create_character_light() -> CharacterProfile:
    return CharacterProfile(
        key="light",
        display_name="Light",
        description="Illuminator and support. Reveals hidden map features and grants small buffs to allies.",
        base_health=11,
        movement_modifier=0,
        attack_modifier=0,
        defense_modifier=0,
        heal_modifier=1,
        starting_corner_index=None,
        special_ability="Illuminate: reveals tiles and temporarily increases ally visibility and accuracy.",
        element=None,
        color="#FFF2B3",
        sprite_name="char_light",
    )
