#!/usr/bin/env python3
"""
Scoring Service - Aggregate criterion scores into one match score.

Runs every criterion scorer for a professional, sums the partial scores,
caps the total at ScorerConfig.max_score and collects the reasons in
evaluation order (service, location, budget, languages, rating,
experience, verification, bonuses).

Scoring one professional never depends on another, so large pools can be
fanned out over a thread pool; results always come back in input order.
"""

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Dict, List, Optional, Sequence
import logging

from pro_scout.config_loader import ScorerConfig
from pro_scout.matcher.models import Candidate, Criteria
from pro_scout.scorer.criteria import CRITERION_SCORERS
from pro_scout.scorer.models import MatchedProfessional

logger = logging.getLogger(__name__)


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


class ScoringService:
    """
    Service for rule-based scoring of professionals against criteria.

    Stateless apart from its config; safe to share between threads.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score_professional(
        self,
        professional: Candidate,
        criteria: Criteria
    ) -> MatchedProfessional:
        """Calculate the aggregate score for a single professional.

        Args:
            professional: Validated candidate snapshot
            criteria: Validated requester criteria

        Returns:
            MatchedProfessional with match_score in [0, max_score], reasons,
            per-criterion components and the distance when it was computed
        """
        raw_score = 0.0
        reasons: List[str] = []
        components: Dict[str, float] = {}
        distance: Optional[float] = None

        for name, scorer in CRITERION_SCORERS:
            result = scorer(professional, criteria, self.config)
            raw_score += result.points
            reasons.extend(result.reasons)
            components[name] = result.points
            if 'distance_km' in result.details:
                distance = result.details['distance_km']

        match_score = _clamp(raw_score, 0.0, self.config.max_score)

        logger.debug(f"Professional {professional.id}: score={match_score:.1f} (raw={raw_score:.1f})")

        return MatchedProfessional(
            professional=professional,
            match_score=match_score,
            match_reasons=reasons,
            distance=distance,
            raw_score=raw_score,
            score_components=components
        )

    def score_professionals(
        self,
        professionals: Sequence[Candidate],
        criteria: Criteria
    ) -> List[MatchedProfessional]:
        """Score every professional, preserving input order.

        Fans out to a thread pool when max_workers > 1 and the pool holds at
        least parallel_min_pool professionals.
        """
        score_one = partial(self._score_for, criteria)

        if self.config.max_workers > 1 and len(professionals) >= self.config.parallel_min_pool:
            logger.debug(f"Scoring {len(professionals)} professionals on {self.config.max_workers} workers")
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                return list(pool.map(score_one, professionals))

        return [score_one(p) for p in professionals]

    def _score_for(self, criteria: Criteria, professional: Candidate) -> MatchedProfessional:
        return self.score_professional(professional, criteria)
