#!/usr/bin/env python3
"""Tests for MPG vs. MPGe classification."""

from catalog import (
    is_equivalent_energy,
    group_is_equivalent_energy,
    economy_label,
    economy_unit,
)
from conftest import vehicle


class TestIsEquivalentEnergy:
    """Tests for per-vehicle classification."""

    def test_fcv_substring(self):
        assert is_equivalent_energy(vehicle(notes="Hybrid FCV model")) is True
        assert is_equivalent_energy(vehicle(notes="FCV")) is True

    def test_other_notes(self):
        assert is_equivalent_energy(vehicle(notes="Hybrid")) is False

    def test_absent_notes(self):
        assert is_equivalent_energy(vehicle(notes=None)) is False

    def test_empty_notes(self):
        assert is_equivalent_energy(vehicle(notes="")) is False

    def test_case_sensitive(self):
        assert is_equivalent_energy(vehicle(notes="fcv")) is False


class TestGroupIsEquivalentEnergy:
    """Tests for group classification (any-of)."""

    def test_any_member_flips_group(self):
        group = [vehicle(notes=None), vehicle(notes="FCV")]
        assert group_is_equivalent_energy(group) is True

    def test_no_members(self):
        group = [vehicle(notes=None), vehicle(notes="Hybrid")]
        assert group_is_equivalent_energy(group) is False

    def test_empty_group(self):
        assert group_is_equivalent_energy([]) is False


class TestLabels:
    """Tests for label selection."""

    def test_economy_label(self):
        assert economy_label(False) == "MPG"
        assert economy_label(True) == "MPG Equivalent (MPGe)"

    def test_economy_unit(self):
        assert economy_unit(False) == "MPG"
        assert economy_unit(True) == "MPGe"
