from element8.components.character import CharacterProfile, Element


def create_character_plant() -> CharacterProfile:
    return CharacterProfile(
        key="plant",
        display_name="Plant",
        description="Nature healer. Gains healing benefits when drawing cards or at end of turn.",
        base_health=11,
        movement_modifier=0,
        attack_modifier=0,
        defense_modifier=0,
        heal_modifier=1,
        starting_corner_index=0,
        special_ability="Leaf Renew: heals when drawing a card and regenerates 1 HP at end of turn.",
        element=Element.WOOD,
        color="green",
        sprite_name="char_plant",
    )
