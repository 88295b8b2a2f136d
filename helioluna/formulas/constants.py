"""Constants shared by the solar and lunar formulas.

Sun formulas follow http://aa.quae.nl/en/reken/zonpositie.html, moon
formulas http://aa.quae.nl/en/reken/hemelpositie.html.
"""

import math

RAD = math.pi / 180

# Date/time
DAY_MS = 86400000
J1970 = 2440588
J2000 = 2451545

# Obliquity of the Earth
OBLIQUITY = RAD * 23.4397

# Perihelion of the Earth (degrees)
PERIHELION = 102.9372

# Solar transit offset (days)
J0 = 0.0009

# Distance from Earth to Sun in km
SUN_DISTANCE_KM = 149598000

# Moon apparent radius + parallax correction used for rise/set (degrees)
MOON_HORIZON_ANGLE = 0.133
