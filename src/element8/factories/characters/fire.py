from element8.components.character import CharacterProfile, Element


def create_character_fire() -> CharacterProfile:
    return CharacterProfile(
        key="fire",
        display_name="Fire",
        description="A fierce attacker. Excels at dealing extra damage in combat.",
        base_health=12,
        movement_modifier=0,
        attack_modifier=2,
        defense_modifier=0,
        heal_modifier=0,
        starting_corner_index=3,
        special_ability="Inferno Strike: increased chance to critically damage adjacent enemies.",
        element=Element.FIRE,
        color="red",
        sprite_name="char_fire",
    )
