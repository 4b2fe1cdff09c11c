"""
Fuel Pricing

Flat price per unit (litre) charged when a vehicle is refuelled.
Last updated: 2026-10-18

REFUEL ELIGIBILITY
------------------
A vehicle is refuelled to full capacity when its fuel level is between 0% and
REFUEL_THRESHOLD_PCT, both ends inclusive. Negative readings are treated as
invalid and never refuelled.
"""

PRICE_PER_UNIT = "1.75"       # $ per litre
REFUEL_THRESHOLD_PCT = 10     # Refuel at or below 10%
REFUEL_FLOOR_PCT = 0          # Readings below 0% are invalid
