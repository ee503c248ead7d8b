#!/usr/bin/env python3
"""
Scoring Module - Rule-based multi-criteria scoring.

Public API:
- ScoringService: Aggregates criterion scores per professional
- MatchedProfessional: Dataclass for scored match results
- apply_result_policy: Threshold filter + stable ranking

Modules:
- models.py: Data structures (CriterionResult, MatchedProfessional)
- criteria.py: The eight criterion scorers and their evaluation order
- service.py: ScoringService aggregate scorer
- policy.py: Threshold filtering and ranking
"""

from pro_scout.scorer.models import CriterionResult, MatchedProfessional
from pro_scout.scorer.service import ScoringService
from pro_scout.scorer.policy import apply_result_policy, filter_by_threshold, rank_by_score

__all__ = [
    'ScoringService', 'MatchedProfessional', 'CriterionResult',
    'apply_result_policy', 'filter_by_threshold', 'rank_by_score'
]
