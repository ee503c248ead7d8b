#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field

from pro_scout.matcher.models import Candidate


@dataclass(frozen=True)
class CriterionResult:
    """Partial score from a single criterion scorer."""
    points: float = 0.0
    reasons: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MatchedProfessional:
    """A candidate annotated with its aggregate match score and reasons."""
    professional: Candidate

    match_score: float = 0.0
    match_reasons: List[str] = field(default_factory=list)
    distance: Optional[float] = None  # km, only when criteria carried a location

    raw_score: float = 0.0
    score_components: Dict[str, float] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.professional.id

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase result payload consumed by the service layer."""
        data = self.professional.model_dump(mode="json", by_alias=True)
        data['matchScore'] = self.match_score
        data['matchReasons'] = list(self.match_reasons)
        if self.distance is not None:
            data['distance'] = self.distance
        data['scoreComponents'] = dict(self.score_components)
        return data
