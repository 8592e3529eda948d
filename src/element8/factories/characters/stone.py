from element8.components.character import CharacterProfile, Element


def create_character_stone() -> CharacterProfile:
    return CharacterProfile(
        key="stone",
        display_name="Stone",
        description="Sturdy defender. Resilient to damage and hard to push back.",
        base_health=13,
        movement_modifier=0,
        attack_modifier=0,
        defense_modifier=1,
        heal_modifier=1,
        starting_corner_index=0,
        special_ability="Stonewall: reduces incoming damage and slightly regenerates on turn end.",
        element=Element.EARTH,
        color="#735C3D",
        sprite_name="char_stone",
    )
