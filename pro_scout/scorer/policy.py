#!/usr/bin/env python3
"""
Result Policy - Threshold filtering and ranking of scored professionals.

Ranking is a stable descending sort on match_score alone: professionals
with equal scores keep their input order. There is no secondary key.
"""

from typing import List, Optional
import logging

import numpy as np

from pro_scout.config_loader import ResultPolicy
from pro_scout.scorer.models import MatchedProfessional

logger = logging.getLogger(__name__)


def filter_by_threshold(
    matches: List[MatchedProfessional],
    min_score: float
) -> List[MatchedProfessional]:
    """Drop matches scoring below min_score."""
    return [m for m in matches if m.match_score >= min_score]


def rank_by_score(matches: List[MatchedProfessional]) -> List[MatchedProfessional]:
    """Sort by match_score descending, keeping input order among ties."""
    if not matches:
        return []

    scores = np.array([m.match_score for m in matches], dtype=np.float64)
    order = np.argsort(-scores, kind="stable")
    return [matches[i] for i in order]


def apply_result_policy(
    matches: List[MatchedProfessional],
    policy: Optional[ResultPolicy]
) -> List[MatchedProfessional]:
    """Apply ResultPolicy: threshold, rank, then truncate.

    Args:
        matches: Scored matches in input order
        policy: ResultPolicy to apply, or None for the default policy

    Returns:
        Surviving matches, highest score first, at most policy.top_k long
    """
    if policy is None:
        policy = ResultPolicy()

    filtered = filter_by_threshold(matches, policy.min_score)
    ranked = rank_by_score(filtered)

    if policy.top_k is not None:
        ranked = ranked[:policy.top_k]

    logger.debug(
        f"Result policy kept {len(ranked)} of {len(matches)} matches "
        f"(min_score={policy.min_score}, top_k={policy.top_k})"
    )
    return ranked
