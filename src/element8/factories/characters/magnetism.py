from element8.components.character import CharacterProfile, Element


def create_character_magnetism() -> CharacterProfile:
    return CharacterProfile(
        key="magnetism",
        display_name="Magnetism",
        description="Controls metallic forces and can disrupt enemy equipment and fortify defenses.",
        base_health=12,
        movement_modifier=0,
        attack_modifier=0,
        defense_modifier=2,
        heal_modifier=0,
        starting_corner_index=1,
        special_ability="Magnetic Field: raises defense and can pull/repel nearby enemy tokens in special moves.",
        element=Element.METAL,
        color="gray",
        sprite_name="char_magnetism",
    )
