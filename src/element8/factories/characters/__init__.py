"""Built-in character profiles."""

from .electricity import create_character_electricity
from .fire import create_character_fire
from .light import create_character_light
from .magnetism import create_character_magnetism
from .plant import create_character_plant
from .stone import create_character_stone
from .water import create_character_water
from .wind import create_character_wind
