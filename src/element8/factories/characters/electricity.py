from element8.components.character import CharacterProfile, Element


def create_character_electricity() -> CharacterProfile:
    return CharacterProfile(
        key="electricity",
        display_name="Electricity",
        description="High-risk, high-reward. Chance to stun opponents and disrupt their next turn.",
        base_health=10,
        movement_modifier=0,
        attack_modifier=1,
        defense_modifier=0,
        heal_modifier=0,
        starting_corner_index=3,
        special_ability="Chain Shock: may stun an enemy (skip their next action) on successful attack.",
        element=Element.LIGHTNING,
        color="yellow",
        sprite_name="char_electricity",
    )
