"""
Unit Tests for Input Loaders

Tests loading vehicle queues and employee pools from CSV and JSON.
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import json
from decimal import Decimal

import polars as pl
import pytest

from parking.errors import ConfigError
from parking.loaders import (
    load_vehicles,
    load_employee_pool,
    vehicles_from_frame,
)
from parking.models import Employee, Fuel, Vehicle


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def vehicles_csv(tmp_path):
    path = tmp_path / "queue.csv"
    path.write_text(
        "licence_plate,size,fuel_capacity,fuel_level\n"
        "A,large,10,0.1\n"
        "B,small,10,0.1\n"
        "C,large,10,-1.1\n"
        "D,large,57.5,0.9\n"
    )
    return path


@pytest.fixture
def vehicles_json(tmp_path):
    """Fixture-style JSON queue (camelCase keys, nested fuel)."""
    path = tmp_path / "queue.json"
    path.write_text(json.dumps([
        {"licencePlate": "A", "size": "large", "fuel": {"capacity": 10, "level": 0.1}},
        {"licencePlate": "B", "size": "small", "fuel": {"capacity": 57.5, "level": 0.07}},
    ]))
    return path


# =============================================================================
# VEHICLE TESTS
# =============================================================================

class TestLoadVehicles:
    """Tests for load_vehicles."""

    def test_csv(self, vehicles_csv):
        vehicles = load_vehicles(vehicles_csv)
        assert len(vehicles) == 4
        assert vehicles[0] == Vehicle("A", "large", Fuel(Decimal("10"), Decimal("0.1")))
        assert vehicles[3].fuel.capacity == Decimal("57.5")

    def test_csv_keeps_exact_decimals(self, vehicles_csv):
        vehicles = load_vehicles(vehicles_csv)
        assert str(vehicles[2].fuel.level) == "-1.1"

    def test_json(self, vehicles_json):
        vehicles = load_vehicles(vehicles_json)
        assert [v.licence_plate for v in vehicles] == ["A", "B"]
        assert vehicles[1].fuel == Fuel(Decimal("57.5"), Decimal("0.07"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_vehicles(tmp_path / "nope.csv")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "queue.xlsx"
        path.write_text("")
        with pytest.raises(ConfigError, match="Unsupported"):
            load_vehicles(path)

    def test_missing_column(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text("licence_plate,size,fuel_capacity\nA,large,10\n")
        with pytest.raises(ConfigError, match="fuel_level"):
            load_vehicles(path)

    def test_bad_number(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text("licence_plate,size,fuel_capacity,fuel_level\nA,large,ten,0.1\n")
        with pytest.raises(ConfigError, match="fuel_capacity"):
            load_vehicles(path)

    def test_non_positive_capacity(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text("licence_plate,size,fuel_capacity,fuel_level\nA,large,0,0.1\n")
        with pytest.raises(ConfigError, match="positive"):
            load_vehicles(path)

    def test_duplicate_plate(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text(
            "licence_plate,size,fuel_capacity,fuel_level\n"
            "A,large,10,0.1\n"
            "A,small,10,0.5\n"
        )
        with pytest.raises(ConfigError, match="Duplicate"):
            load_vehicles(path)

    def test_json_not_a_list(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text(json.dumps({"licencePlate": "A"}))
        with pytest.raises(ConfigError):
            load_vehicles(path)

    def test_blank_plates(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text(
            "licence_plate,size,fuel_capacity,fuel_level\n"
            ",large,10,0.1\n"
            ",small,10,0.5\n"
        )
        with pytest.raises(ConfigError, match="licence_plate"):
            load_vehicles(path)

    def test_blank_size(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text("licence_plate,size,fuel_capacity,fuel_level\nA, ,10,0.1\n")
        with pytest.raises(ConfigError, match="size for 'A'"):
            load_vehicles(path)

    def test_empty_csv(self, tmp_path):
        path = tmp_path / "queue.csv"
        path.write_text("")
        with pytest.raises(ConfigError, match="empty"):
            load_vehicles(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text('[{"licencePlate": "A",')
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_vehicles(path)

    def test_json_item_not_an_object(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text(json.dumps(["A"]))
        with pytest.raises(ConfigError, match="JSON object"):
            load_vehicles(path)

    def test_json_missing_plate(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text(json.dumps([
            {"size": "large", "fuel": {"capacity": 10, "level": 0.1}},
            {"size": "small", "fuel": {"capacity": 10, "level": 0.5}},
        ]))
        with pytest.raises(ConfigError, match="licence_plate"):
            load_vehicles(path)

    def test_from_frame(self):
        df = pl.DataFrame({
            "licence_plate": ["X"],
            "size": ["small"],
            "fuel_capacity": ["40"],
            "fuel_level": ["0"],
        })
        assert vehicles_from_frame(df) == [
            Vehicle("X", "small", Fuel(Decimal("40"), Decimal("0")))
        ]


# =============================================================================
# EMPLOYEE TESTS
# =============================================================================

class TestLoadEmployeePool:
    """Tests for load_employee_pool."""

    def test_csv(self, tmp_path):
        path = tmp_path / "pool.csv"
        path.write_text("name,commission_pct\nAlan Grant,15\nDennis Nedry,-5\n")
        assert load_employee_pool(path) == [
            Employee("Alan Grant", Decimal("15")),
            Employee("Dennis Nedry", Decimal("-5")),
        ]

    def test_json(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text(json.dumps([
            {"name": "Ian Malcolm", "commissionPct": 11},
            {"name": "John Hammond", "commissionPct": 150.5},
        ]))
        assert load_employee_pool(path) == [
            Employee("Ian Malcolm", Decimal("11")),
            Employee("John Hammond", Decimal("150.5")),
        ]

    def test_duplicate_name(self, tmp_path):
        path = tmp_path / "pool.csv"
        path.write_text("name,commission_pct\nAlan Grant,15\nAlan Grant,11\n")
        with pytest.raises(ConfigError, match="Duplicate"):
            load_employee_pool(path)

    def test_missing_commission(self, tmp_path):
        path = tmp_path / "pool.csv"
        path.write_text("name,commission_pct\nAlan Grant,\n")
        with pytest.raises(ConfigError, match="commission_pct"):
            load_employee_pool(path)

    def test_blank_name(self, tmp_path):
        path = tmp_path / "pool.csv"
        path.write_text("name,commission_pct\n,15\n,11\n")
        with pytest.raises(ConfigError, match="no name"):
            load_employee_pool(path)

    def test_empty_csv(self, tmp_path):
        path = tmp_path / "pool.csv"
        path.write_text("")
        with pytest.raises(ConfigError, match="empty"):
            load_employee_pool(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text('[{"name": "Alan Grant", "commissionPct": 15')
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_employee_pool(path)

    def test_json_item_not_an_object(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text(json.dumps(["Alan Grant"]))
        with pytest.raises(ConfigError, match="JSON object"):
            load_employee_pool(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
