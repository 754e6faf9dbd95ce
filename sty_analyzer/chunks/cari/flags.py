# sty_analyzer/chunks/cari/flags.py
from enum import IntFlag

class VehicleFlags(IntFlag):
    """First flag byte of a CARI entry."""
    PED_JUMP = 0x01            # Peds jump out of the way
    EMERG_LIGHTS = 0x02        # Emergency lights
    ROOF_LIGHTS = 0x04         # Lights on the roof
    CAB = 0x08                 # Can tow a trailer
    TRAILER = 0x10             # Is a trailer
    FORHIRE_LIGHTS = 0x20      # Taxi light
    ROOF_DECAL = 0x40          # Roof decal
    REAR_EMERG_LIGHTS = 0x80   # Emergency lights at the back

class VehicleFlags2(IntFlag):
    """Second flag byte of a CARI entry."""
    COLLIDE_OVER = 0x01        # Can drive over other cars
    POPUP = 0x02               # Has popup headlights
