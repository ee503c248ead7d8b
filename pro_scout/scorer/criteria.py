#!/usr/bin/env python3
"""
Criterion Scorers - One scoring rule per decision factor.

Each scorer takes (professional, criteria, config) and returns a
CriterionResult with awarded points and human-readable reasons. Scorers are
independent of each other; a criterion that is absent from the request
awards nothing and adds no reason. Point values come from ScorerWeights.
"""

from typing import Callable, List, Optional, Tuple
import logging

from pro_scout.config_loader import ScorerConfig
from pro_scout.matcher.distance import DistanceCalculator
from pro_scout.matcher.models import Candidate, Criteria
from pro_scout.scorer.models import CriterionResult

logger = logging.getLogger(__name__)

CriterionScorer = Callable[[Candidate, Criteria, ScorerConfig], CriterionResult]


def _award(points: float, reason: Optional[str], **details) -> CriterionResult:
    # Zero-point rules stay silent in the reason list
    if points > 0 and reason:
        return CriterionResult(points=points, reasons=[reason], details=details)
    return CriterionResult(points=max(0.0, points), reasons=[], details=details)


def score_service(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    """Full weight for an exact service match; no partial credit."""
    if criteria.service_type is None:
        return CriterionResult()
    if criteria.service_type in professional.services:
        return _award(config.weights.service_match, "Exact service match")
    return CriterionResult()


def location_points(distance_km: float, config: ScorerConfig) -> Tuple[float, Optional[str]]:
    """Map a distance onto the location tiers. Tier bounds are inclusive."""
    w = config.weights
    if distance_km <= config.very_close_km:
        return w.location_very_close, "Very close"
    if distance_km <= config.close_km:
        return w.location_close, "Close by"
    if distance_km <= config.nearby_km:
        return w.location_nearby, "In your area"
    return 0.0, None


def score_location(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    """
    Score proximity to the requester.

    The computed distance is always reported in details['distance_km'] when
    the criteria carry a location, even if the candidate is out of range.
    """
    if criteria.location is None:
        return CriterionResult()

    distance_km = DistanceCalculator.calculate(criteria.location, professional.location)
    points, reason = location_points(distance_km, config)
    return _award(points, reason, distance_km=distance_km)


def score_budget(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    budget = criteria.budget
    if budget is None:
        return CriterionResult()

    w = config.weights
    rate = professional.hourly_rate

    if budget.min <= rate <= budget.max:
        return _award(w.budget_within, "Within budget")
    if rate < budget.min:
        return _award(w.budget_near, "Below your budget")
    if rate <= budget.max * config.budget_tolerance:
        return _award(w.budget_near, "Slightly over budget")
    return CriterionResult()


def score_languages(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    if not criteria.languages:
        return CriterionResult()

    wanted = set(criteria.languages)
    spoken = wanted & set(professional.languages)

    if spoken == wanted:
        return _award(config.weights.languages_all, "Speaks your languages")
    if spoken:
        return _award(config.weights.languages_some, "Speaks some of your languages")
    return CriterionResult()


def score_rating(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    """Reputation tiers; the top tier also needs enough reviews to be trusted."""
    w = config.weights
    rating = professional.rating

    if rating >= config.top_rating and professional.review_count >= config.top_rating_min_reviews:
        return _award(w.rating_top, "Highly rated")
    if rating >= config.high_rating:
        return _award(w.rating_high, "Well rated")
    if rating >= config.good_rating:
        return _award(w.rating_good, "Good rating")
    return CriterionResult()


def score_experience(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    """
    Score experience against the requested level.

    Without a requested level, experience counts one point per year up to
    the cap. "beginner" has no rule of its own and awards nothing.
    """
    w = config.weights
    years = professional.experience_years
    level = criteria.experience_level

    if level is None:
        points = min(w.experience_cap, years)
        noun = "year" if years == 1 else "years"
        return _award(points, f"{years:g} {noun} of experience")

    if level == "expert":
        if years >= config.expert_min_years:
            return _award(w.experience_met, "Expert-level experience")
        return CriterionResult()

    if level == "intermediate":
        if years >= config.intermediate_min_years:
            return _award(w.experience_met, "Experienced professional")
        return CriterionResult()

    if level == "any":
        return _award(w.experience_any, "Meets experience preference")

    return CriterionResult()


def score_verification(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    if not criteria.verification_required:
        return CriterionResult()

    w = config.weights
    if professional.verification_level == "background-check":
        return _award(w.verification_background_check, "Background checked")
    if professional.verification_level == "enhanced":
        return _award(w.verification_enhanced, "Enhanced verification")
    return CriterionResult()


def score_bonuses(professional: Candidate, criteria: Criteria, config: ScorerConfig) -> CriterionResult:
    """Additive situational bonuses; each applies independently."""
    w = config.weights
    points = 0.0
    reasons: List[str] = []
    details = {}

    if criteria.preferred_times:
        overlap = [slot for slot in criteria.preferred_times if professional.availability.is_available(slot)]
        details['matched_times'] = overlap
        if overlap and w.bonus_preferred_times > 0:
            points += w.bonus_preferred_times
            reasons.append("Available at your preferred times")

    if professional.on_time_rate >= config.on_time_rate_min and w.bonus_on_time > 0:
        points += w.bonus_on_time
        reasons.append("Reliably on time")

    if professional.response_time_minutes <= config.fast_response_minutes and w.bonus_fast_response > 0:
        points += w.bonus_fast_response
        reasons.append("Responds quickly")

    return CriterionResult(points=points, reasons=reasons, details=details)


# Evaluation order; the aggregate concatenates reasons in this order
CRITERION_SCORERS: List[Tuple[str, CriterionScorer]] = [
    ('service', score_service),
    ('location', score_location),
    ('budget', score_budget),
    ('languages', score_languages),
    ('rating', score_rating),
    ('experience', score_experience),
    ('verification', score_verification),
    ('bonuses', score_bonuses),
]
