from element8.components.character import CharacterProfile, Element


def create_character_wind() -> CharacterProfile:
    return CharacterProfile(
        key="wind",
        display_name="Wind",
        description="Light and fast. Gains extra movement to outmaneuver opponents.",
        base_health=10,
        movement_modifier=2,
        attack_modifier=0,
        defense_modifier=0,
        heal_modifier=0,
        starting_corner_index=1,
        special_ability="Gale Step: +2 movement and can move through one occupied tile.",
        element=Element.WIND,
        color="cyan",
        sprite_name="char_wind",
    )
