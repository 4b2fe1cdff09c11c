"""
Service Fees

Prices each vehicle in the queue: a flat parking fee by size, plus fuel when
the tank is low enough to be refuelled.

    net_total = parking_fee + fuel_fee

REFUEL RULE
-----------
fuel_pct = level * 100. The vehicle is refuelled to full capacity when
REFUEL_FLOOR_PCT <= fuel_pct <= REFUEL_THRESHOLD_PCT (0% and 10% both
refuel). Negative readings are invalid and anything above 10% does not need
fuel; both are priced as parking only.
"""

import logging

from ..arithmetic import HUNDRED, ZERO
from ..config import ServiceConfig
from ..data import REFUEL_FLOOR_PCT, REFUEL_THRESHOLD_PCT
from ..errors import ConfigError
from ..models import FuelQuote, PricedJob, Vehicle


logger = logging.getLogger(__name__)


def price_queue(vehicles: list[Vehicle], config: ServiceConfig) -> list[PricedJob]:
    """
    Calculate service fees for every vehicle in the queue.

    Args:
        vehicles: Vehicle queue, in arrival order
        config: Rates, fuel price and arithmetic context for this batch

    Returns:
        New list of PricedJob, same order and length as the queue

    Raises:
        ConfigError: If a vehicle's size has no parking rate
    """
    jobs = [price_vehicle(vehicle, config) for vehicle in vehicles]

    refuelled = sum(1 for job in jobs if job.fuel_added > 0)
    logger.debug("Priced %d vehicle(s), %d refuelled", len(jobs), refuelled)

    return jobs


def price_vehicle(vehicle: Vehicle, config: ServiceConfig) -> PricedJob:
    """Price a single vehicle."""
    parking_fee = calculate_parking_fee(vehicle, config)
    fuel = calculate_units_to_fuel(vehicle, config)

    return PricedJob(
        vehicle=vehicle,
        fuel_added=fuel.units,
        parking_fee=parking_fee,
        fuel_fee=fuel.price,
        net_total=config.arithmetic.add(fuel.price, parking_fee),
    )


def calculate_parking_fee(vehicle: Vehicle, config: ServiceConfig):
    """Look up the flat parking fee for the vehicle's size."""
    try:
        return config.parking_rates[vehicle.size]
    except KeyError:
        known = ", ".join(sorted(config.parking_rates)) or "none"
        raise ConfigError(
            f"No parking rate for size '{vehicle.size}' "
            f"(vehicle {vehicle.licence_plate}). Known sizes: {known}"
        )


def needs_refuel(vehicle: Vehicle, config: ServiceConfig) -> bool:
    """True if the fuel level is within the inclusive refuel range."""
    fuel_pct = config.arithmetic.multiply(vehicle.fuel.level, HUNDRED)
    return REFUEL_FLOOR_PCT <= fuel_pct <= REFUEL_THRESHOLD_PCT


def calculate_units_to_fuel(vehicle: Vehicle, config: ServiceConfig) -> FuelQuote:
    """
    Work out how much fuel to add and what it costs.

    Returns:
        FuelQuote(units, price); both zero when the vehicle is not refuelled
    """
    if not needs_refuel(vehicle, config):
        return FuelQuote(units=ZERO, price=ZERO)

    math = config.arithmetic
    capacity = vehicle.fuel.capacity
    units = math.subtract(capacity, math.multiply(capacity, vehicle.fuel.level))
    price = math.multiply(units, config.fuel_price_per_unit)

    return FuelQuote(units=units, price=price)
