#!/usr/bin/env python3
"""Tests for rental cost helper functions."""

import pytest

from rental import (
    InvalidArgumentError,
    VehicleKind,
    calc_daily_surcharge,
    calc_rental_cost,
    validate_days,
)


class TestCalcDailySurcharge:
    """Tests for calc_daily_surcharge."""

    def test_car_with_gps(self):
        assert calc_daily_surcharge(VehicleKind.CAR, True) == 5.0

    def test_car_without_gps(self):
        assert calc_daily_surcharge(VehicleKind.CAR, False) == 0.0

    def test_motorcycle_with_sidecar(self):
        assert calc_daily_surcharge(VehicleKind.MOTORCYCLE, True) == 10.0

    def test_motorcycle_without_sidecar(self):
        assert calc_daily_surcharge(VehicleKind.MOTORCYCLE, False) == 0.0

    def test_truck_scales_with_capacity(self):
        assert calc_daily_surcharge(VehicleKind.TRUCK, 10.0) == 20.0
        assert calc_daily_surcharge(VehicleKind.TRUCK, 0.0) == 0.0


class TestCalcRentalCost:
    """Tests for calc_rental_cost."""

    @pytest.mark.parametrize("days", [1, 3, 7, 30])
    def test_car_formula(self, days):
        assert calc_rental_cost(VehicleKind.CAR, 30.0, days, True) == 30 * days + 5 * days
        assert calc_rental_cost(VehicleKind.CAR, 30.0, days, False) == 30 * days

    @pytest.mark.parametrize("days", [1, 2, 14])
    def test_motorcycle_formula(self, days):
        assert (
            calc_rental_cost(VehicleKind.MOTORCYCLE, 20.0, days, True)
            == 20 * days + 10 * days
        )
        assert calc_rental_cost(VehicleKind.MOTORCYCLE, 20.0, days, False) == 20 * days

    @pytest.mark.parametrize("days", [1, 5])
    def test_truck_formula(self, days):
        assert (
            calc_rental_cost(VehicleKind.TRUCK, 80.0, days, 10.0)
            == 80 * days + 10 * 2 * days
        )


class TestValidateDays:
    """Tests for validate_days."""

    def test_positive_days_pass_through(self):
        assert validate_days(1) == 1
        assert validate_days(30) == 30

    @pytest.mark.parametrize("days", [0, -1, 1.5, "3", None, True])
    def test_rejects_non_positive_or_non_integer(self, days):
        with pytest.raises(InvalidArgumentError):
            validate_days(days)
