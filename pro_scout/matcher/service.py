#!/usr/bin/env python3
"""
Matcher Service - Entry point of the professional matching engine.

Pipeline per call:
1. Validate candidates and criteria (plain mappings are accepted)
2. Score every candidate against the criteria (ScoringService)
3. Drop candidates below the score threshold
4. Rank survivors by score, highest first (stable for ties)

The service holds no state between calls; it fetches nothing and
persists nothing. Callers supply the pool and consume the ranked list.
"""
from typing import Any, List, Optional, Sequence
import logging

from pro_scout.config_loader import MatchingConfig
from pro_scout.exceptions import InvalidMatchInputError
from pro_scout.matcher.models import Candidate, as_candidate, as_criteria
from pro_scout.matcher.similar import SimilarityRecommender
from pro_scout.scorer.models import MatchedProfessional
from pro_scout.scorer.policy import apply_result_policy
from pro_scout.scorer.service import ScoringService

logger = logging.getLogger(__name__)


def _as_pool(candidates: Sequence[Any]) -> List[Candidate]:
    return [as_candidate(c, position=i) for i, c in enumerate(candidates)]


class MatcherService:
    """
    Service for matching and ranking professionals.

    Wires the scoring pipeline and the similarity recommender from a
    single MatchingConfig.
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        """
        Initialize matcher service.

        Args:
            config: MatchingConfig; defaults reproduce the standard weight
                table, 40-point threshold and a similar-limit of 5
        """
        self.config = config or MatchingConfig()
        self.scoring_service = ScoringService(self.config.scorer)
        self.recommender = SimilarityRecommender(self.scoring_service, self.config)

    def match_professionals(
        self,
        candidates: Sequence[Any],
        criteria: Any = None
    ) -> List[MatchedProfessional]:
        """Score, filter and rank candidates against criteria.

        Args:
            candidates: Candidate models or camelCase/snake_case mappings
            criteria: Criteria model, mapping, or None for no criteria

        Returns:
            Matches scoring at least the threshold, highest score first

        Raises:
            InvalidMatchInputError: If a candidate or the criteria is invalid
        """
        pool = _as_pool(candidates)
        validated_criteria = as_criteria(criteria)

        scored = self.scoring_service.score_professionals(pool, validated_criteria)
        results = apply_result_policy(scored, self.config.result_policy)

        logger.info(f"Matched {len(results)} of {len(pool)} professionals")
        return results

    def get_similar_professionals(
        self,
        reference: Any,
        candidates: Sequence[Any],
        limit: Optional[int] = None
    ) -> List[MatchedProfessional]:
        """Find professionals similar to a reference professional.

        Args:
            reference: Reference professional (model or mapping)
            candidates: Pool to search; the reference is excluded by id
            limit: Maximum results, defaults to SimilarityConfig.limit

        Returns:
            At most `limit` matches, highest score first

        Raises:
            InvalidMatchInputError: On invalid input or a negative limit
        """
        if limit is None:
            limit = self.config.similar.limit
        if limit < 0:
            raise InvalidMatchInputError(f"limit must be >= 0, got {limit}", item=limit)

        reference_professional = as_candidate(reference)
        pool = _as_pool(candidates)

        return self.recommender.recommend(reference_professional, pool, limit)


def match_professionals(
    candidates: Sequence[Any],
    criteria: Any = None,
    config: Optional[MatchingConfig] = None
) -> List[MatchedProfessional]:
    """Module-level shortcut for MatcherService(config).match_professionals."""
    return MatcherService(config).match_professionals(candidates, criteria)


def get_similar_professionals(
    reference: Any,
    candidates: Sequence[Any],
    limit: Optional[int] = None,
    config: Optional[MatchingConfig] = None
) -> List[MatchedProfessional]:
    """Module-level shortcut for MatcherService(config).get_similar_professionals."""
    return MatcherService(config).get_similar_professionals(reference, candidates, limit)
