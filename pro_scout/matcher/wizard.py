#!/usr/bin/env python3
"""
Wizard Criteria - Build Criteria from the match-wizard payload.

The booking front end collects requester preferences in a multi-step
wizard (service, budget, language, verification, experience, timing).
This module maps that payload onto Criteria.
"""
from typing import Any, Dict, List, Mapping, Optional
import logging

from pro_scout.exceptions import InvalidMatchInputError
from pro_scout.matcher.models import Criteria, as_criteria

logger = logging.getLogger(__name__)

LANGUAGE_PREFERENCES: Dict[str, List[str]] = {
    'english': ['english'],
    'spanish': ['spanish'],
    'bilingual': ['english', 'spanish'],
}

TIME_SLOTS = ('morning', 'afternoon', 'evening')


def _number(data: Mapping[str, Any], key: str) -> Optional[float]:
    raw = data.get(key)
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise InvalidMatchInputError(f"Invalid wizard field {key}={raw!r}", item=raw) from e


def experience_level_for_years(years: float) -> Optional[str]:
    """
    Map a minimum-years answer onto an experience level.

    Answers below two years map to no level; the per-year default applies.
    """
    if years >= 5:
        return 'expert'
    if years >= 2:
        return 'intermediate'
    return None


def criteria_from_wizard(data: Mapping[str, Any]) -> Criteria:
    """
    Convert a wizard payload into Criteria.

    Args:
        data: Wizard payload with optional keys serviceType, budgetMin,
            budgetMax, languagePreference, verificationRequired,
            experienceYears, preferredTime, latitude, longitude. The wizard
            itself collects country/city/neighborhood; latitude and
            longitude are added by the caller after geocoding.

    Returns:
        Validated Criteria; unknown option values are ignored

    Raises:
        InvalidMatchInputError: If a numeric field is not a valid number
    """
    criteria: Dict[str, Any] = {}

    service_type = data.get('serviceType')
    if service_type:
        criteria['service_type'] = service_type

    budget_max = _number(data, 'budgetMax')
    if budget_max is not None:
        budget_min = _number(data, 'budgetMin')
        criteria['budget'] = {'min': budget_min or 0.0, 'max': budget_max}

    languages = LANGUAGE_PREFERENCES.get(data.get('languagePreference') or '')
    if languages:
        criteria['languages'] = languages

    if data.get('verificationRequired'):
        criteria['verification_required'] = True

    years = _number(data, 'experienceYears')
    level = experience_level_for_years(years) if years is not None else None
    if level:
        criteria['experience_level'] = level

    preferred_time = data.get('preferredTime')
    if preferred_time in TIME_SLOTS:
        criteria['preferred_times'] = [preferred_time]

    lat = _number(data, 'latitude')
    lng = _number(data, 'longitude')
    if lat is not None and lng is not None:
        criteria['location'] = {'lat': lat, 'lng': lng}

    logger.debug(f"Wizard criteria: {sorted(criteria)}")
    return as_criteria(criteria)
