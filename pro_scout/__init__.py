"""
ProScout - Professional matching and ranking engine.

Public API:
- match_professionals(candidates, criteria): score, filter and rank
- get_similar_professionals(reference, candidates, limit): look-alikes
- MatcherService: the same two operations bound to a MatchingConfig
"""
from pro_scout.matcher.models import Candidate, Criteria
from pro_scout.matcher.service import (
    MatcherService, match_professionals, get_similar_professionals
)
from pro_scout.scorer.models import MatchedProfessional
from pro_scout.exceptions import ServiceException, InvalidMatchInputError

__all__ = [
    'match_professionals', 'get_similar_professionals', 'MatcherService',
    'Candidate', 'Criteria', 'MatchedProfessional',
    'ServiceException', 'InvalidMatchInputError'
]
