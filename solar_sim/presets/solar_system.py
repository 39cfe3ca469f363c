"""The Sun, planets, the Moon and Pluto.

State vectors are NASA JPL Horizons values in SI units (m, m/s).
"""

from typing import List

from solar_sim.physics.body import Body
from solar_sim.presets.base import Preset

# name, mass (kg), position (m), velocity (m/s)
SOLAR_SYSTEM_DATA = [
    ("The Sun", 1.989e30,
     (0.0, 0.0, 0.0),
     (1.998619875971241, 1.177175852520643e1, -6.135600299763972e-2)),
    ("Mercury", 3.3011e23,
     (1.275387239870491e10, -6.680195324480709e10, -6.616376210554786e09),
     (3.815800795678611e04, 1.123692837720359e04, -2.583452372780768e03)),
    ("Venus", 4.867e24,
     (-8.073224723501202e10, 7.027586666429530e10, 5.627818208653621e09),
     (-2.299827401900994e04, -2.669115882767952e04, 9.610940692989782e02)),
    ("Earth", 5.972e24,
     (4.788721549926552e10, 1.398390053760727e11, -2.917617879798263e07),
     (-2.869322295421606e04, 9.472398427890313e03, -1.294094780725619)),
    ("The Moon", 734.9e20,
     (4.749196053391321e10, 1.399182076993898e11, -3.486943982706219e07),
     (-2.890724003060377e04, 8.531016069261970e03, 8.300527233703736e01)),
    ("Mars", 6.4171e23,
     (-2.360304784158461e11, 7.782743203688863e10, 7.409494561464485e09),
     (-6.646816636079097e03, -2.094094408471671e04, -2.759397656641038e02)),
    ("Jupiter", 1.89813e27,
     (-7.635337060440624e11, 2.666352191711917e11, 1.596697237644111e10),
     (-4.459151830811911e03, -1.171879602036105e04, 1.485480013373461e02)),
    ("Saturn", 5.68319e26,
     (-5.754602000703751e11, -1.380800977297312e12, 4.691113811667019e10),
     (8.388118620089763e03, -3.745812490969359e03, -2.682504240279582e02)),
    ("Uranus", 86.8103e24,
     (2.828705362370189e12, 9.657796340541244e11, -3.305961929341555e10),
     (-2.249907923122420e03, 6.127203368970902e03, 5.166083013695255e01)),
    ("Neptune", 102.41e24,
     (4.177286553745139e12, -1.624410031732890e12, -6.281810904534376e10),
     (1.934495516018552e03, 5.098519902111810e03, -1.496666233625485e02)),
    ("Pluto", 1.308e22,
     (1.263871593868758e12, -4.769395770475431e12, 1.447666788459496e11),
     (5.347856858111191e03, 2.674281760600502e02, -1.564505494419083e03)),
]


class SolarSystem(Preset):
    """Default dataset used when no bodies are configured."""

    @property
    def name(self) -> str:
        return "solar_system"

    def generate(self) -> List[Body]:
        return [
            Body(name, mass, position, velocity)
            for name, mass, position, velocity in SOLAR_SYSTEM_DATA
        ]
