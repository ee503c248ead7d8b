"""Matcher Module - Inputs, distance and the matching pipeline entry point."""
from pro_scout.matcher.models import (
    GeoPoint, BudgetRange, Availability, Candidate, Criteria,
    as_candidate, as_criteria
)
from pro_scout.matcher.distance import DistanceCalculator, haversine_km
from pro_scout.matcher.wizard import criteria_from_wizard

__all__ = [
    'GeoPoint', 'BudgetRange', 'Availability', 'Candidate', 'Criteria',
    'as_candidate', 'as_criteria',
    'DistanceCalculator', 'haversine_km',
    'criteria_from_wizard'
]
