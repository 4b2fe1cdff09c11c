"""
Unit Tests for Service Configuration and Reference Data
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from decimal import Decimal

import pytest

from parking.config import load_config
from parking.data import load_parking_rates, load_employees
from parking.errors import ConfigError


# =============================================================================
# REFERENCE DATA TESTS
# =============================================================================

class TestReferenceData:
    """Tests for the shipped reference files."""

    def test_parking_rates(self):
        assert load_parking_rates() == {"small": Decimal("25"), "large": Decimal("35")}

    def test_employees(self):
        employees = load_employees()
        assert len(employees) == 4
        assert employees[0].name == "Alan Grant"
        assert employees[2].commission_pct == Decimal("12.5")

    def test_duplicate_size(self, tmp_path):
        path = tmp_path / "rates.csv"
        path.write_text("size,rate\nsmall,25\nsmall,30\n")
        with pytest.raises(ConfigError, match="Duplicate"):
            load_parking_rates(path)

    def test_bad_rate(self, tmp_path):
        path = tmp_path / "rates.csv"
        path.write_text("size,rate\nsmall,cheap\n")
        with pytest.raises(ConfigError, match="small"):
            load_parking_rates(path)

    def test_missing_column(self, tmp_path):
        path = tmp_path / "employees.csv"
        path.write_text("name\nAlan Grant\n")
        with pytest.raises(ConfigError, match="commission_pct"):
            load_employees(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_parking_rates(tmp_path / "missing.csv")

    def test_blank_employee_names(self, tmp_path):
        path = tmp_path / "employees.csv"
        path.write_text("name,commission_pct\n,15\n,11\n")
        with pytest.raises(ConfigError, match="Missing name"):
            load_employees(path)

    def test_blank_size(self, tmp_path):
        path = tmp_path / "rates.csv"
        path.write_text("size,rate\n ,25\nlarge,35\n")
        with pytest.raises(ConfigError, match="Missing size"):
            load_parking_rates(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "rates.csv"
        path.write_text("")
        with pytest.raises(ConfigError, match="empty"):
            load_parking_rates(path)


# =============================================================================
# CONFIG TESTS
# =============================================================================

class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()
        assert config.parking_rates == {"small": Decimal("25"), "large": Decimal("35")}
        assert config.fuel_price_per_unit == Decimal("1.75")
        assert config.arithmetic.decimal_places == 5
        assert len(config.employees) == 4

    def test_overrides(self):
        config = load_config(
            fuel_price_per_unit=2.1,
            decimal_places=2,
            parking_rates={"small": "20"},
            employees=[],
        )
        assert config.fuel_price_per_unit == Decimal("2.1")
        assert config.arithmetic.decimal_places == 2
        assert config.parking_rates == {"small": Decimal("20")}
        assert config.employees == ()

    def test_negative_fuel_price(self):
        with pytest.raises(ConfigError):
            load_config(fuel_price_per_unit="-1")

    def test_invalid_fuel_price(self):
        with pytest.raises(ConfigError):
            load_config(fuel_price_per_unit="lots")

    def test_negative_rate(self):
        with pytest.raises(ConfigError, match="large"):
            load_config(parking_rates={"small": 25, "large": -35})

    def test_negative_decimal_places(self):
        with pytest.raises(ConfigError):
            load_config(decimal_places=-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
