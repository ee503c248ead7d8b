#!/usr/bin/env python3
"""
Similar Professionals - "Professionals like this one" recommendations.

Derives synthetic criteria from a reference professional and runs them
through the regular scoring pipeline over the rest of the pool.
"""
from typing import List, Sequence
import logging

from pro_scout.config_loader import MatchingConfig, ResultPolicy, SimilarityConfig
from pro_scout.matcher.models import BudgetRange, Candidate, Criteria
from pro_scout.scorer.models import MatchedProfessional
from pro_scout.scorer.policy import apply_result_policy
from pro_scout.scorer.service import ScoringService

logger = logging.getLogger(__name__)


def build_similarity_criteria(reference: Candidate, config: SimilarityConfig) -> Criteria:
    """
    Build criteria describing the reference professional.

    The first listed service becomes the service type; with no services the
    service criterion simply does not apply. The budget is a band around
    the reference's hourly rate.
    """
    rate = reference.hourly_rate
    return Criteria(
        service_type=reference.services[0] if reference.services else None,
        location=reference.location,
        budget=BudgetRange(
            min=rate * config.budget_floor_ratio,
            max=rate * config.budget_ceiling_ratio
        ),
        languages=reference.languages,
    )


class SimilarityRecommender:
    """Recommend professionals similar to a reference professional."""

    def __init__(self, scoring_service: ScoringService, config: MatchingConfig):
        self.scoring_service = scoring_service
        self.config = config

    def recommend(
        self,
        reference: Candidate,
        pool: Sequence[Candidate],
        limit: int
    ) -> List[MatchedProfessional]:
        """
        Rank pool against the reference, excluding the reference itself.

        Args:
            reference: Professional to find look-alikes for
            pool: Candidate pool (may contain the reference)
            limit: Maximum number of results

        Returns:
            At most `limit` matches above the score threshold, best first
        """
        criteria = build_similarity_criteria(reference, self.config.similar)
        others = [p for p in pool if p.id != reference.id]

        scored = self.scoring_service.score_professionals(others, criteria)
        policy = ResultPolicy(min_score=self.config.result_policy.min_score)
        ranked = apply_result_policy(scored, policy)[:limit]

        logger.info(f"Similar to {reference.id}: {len(ranked)} of {len(others)} professionals returned")
        return ranked
