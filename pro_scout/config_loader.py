import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class ScorerWeights(BaseModel):
    """
    Point table for the eight criterion scorers.

    | Criterion     | Max | Tiers                                          |
    |---------------|-----|------------------------------------------------|
    | service       | 30  | exact match only                               |
    | location      | 20  | <=5 km 20, <=10 km 15, <=20 km 10              |
    | budget        | 15  | in range 15, below min / <=10% over max 10     |
    | languages     | 15  | all requested 15, some 10                      |
    | rating        | 10  | >=4.8 with 20+ reviews 10, >=4.5 7, >=4.0 5    |
    | experience    | 5   | level met 5, "any" 3, no level min(5, years)   |
    | verification  | 5   | background-check 5, enhanced 3                 |
    | bonuses       | 7   | preferred times 3, on time 2, fast response 2  |

    The sum of maxima is 107; the aggregate is capped at ScorerConfig.max_score.
    """
    service_match: float = 30.0

    location_very_close: float = 20.0
    location_close: float = 15.0
    location_nearby: float = 10.0

    budget_within: float = 15.0
    budget_near: float = 10.0

    languages_all: float = 15.0
    languages_some: float = 10.0

    rating_top: float = 10.0
    rating_high: float = 7.0
    rating_good: float = 5.0

    experience_met: float = 5.0
    experience_any: float = 3.0
    experience_cap: float = 5.0

    verification_background_check: float = 5.0
    verification_enhanced: float = 3.0

    bonus_preferred_times: float = 3.0
    bonus_on_time: float = 2.0
    bonus_fast_response: float = 2.0


class ScorerConfig(BaseModel):
    """
    Configuration for the ScoringService (rule-based criterion scoring).

    Holds the weight table plus the thresholds each criterion is tiered on.
    """
    weights: ScorerWeights = Field(default_factory=ScorerWeights)

    # Location tiers (km, inclusive upper bounds)
    very_close_km: float = 5.0
    close_km: float = 10.0
    nearby_km: float = 20.0

    # Rates up to max * budget_tolerance still earn partial budget credit
    budget_tolerance: float = 1.1

    top_rating: float = 4.8
    top_rating_min_reviews: int = 20
    high_rating: float = 4.5
    good_rating: float = 4.0

    expert_min_years: float = 5.0
    intermediate_min_years: float = 2.0

    on_time_rate_min: float = 95.0
    fast_response_minutes: float = 60.0

    max_score: float = 100.0

    # Fan-out for large pools; 1 keeps scoring on the calling thread
    max_workers: int = Field(default=1, ge=1)
    parallel_min_pool: int = Field(default=200, ge=1)


class ResultPolicy(BaseModel):
    """Post-scoring result filtering and truncation policy.

    Applied after scoring: drop below min_score, rank, then truncate.
    """
    min_score: float = Field(default=40.0, ge=0, le=100)
    top_k: Optional[int] = Field(default=None, ge=0)  # None = no truncation


class SimilarityConfig(BaseModel):
    """Settings for "professionals similar to X" lookups."""
    limit: int = Field(default=5, ge=0)
    budget_floor_ratio: float = 0.8
    budget_ceiling_ratio: float = 1.2

    @model_validator(mode="after")
    def _check_ratios(self) -> "SimilarityConfig":
        if not 0 <= self.budget_floor_ratio <= self.budget_ceiling_ratio:
            raise ValueError(
                f"budget_floor_ratio {self.budget_floor_ratio} must be between 0 and "
                f"budget_ceiling_ratio {self.budget_ceiling_ratio}"
            )
        return self


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    similar: SimilarityConfig = Field(default_factory=SimilarityConfig)


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if data.get('matching') is None:
        data['matching'] = {}
    matching = data['matching']

    # Allow env var override for the result floor
    env_min_score = os.environ.get("PRO_SCOUT_MIN_SCORE")
    if env_min_score:
        if 'result_policy' not in matching or matching['result_policy'] is None:
            matching['result_policy'] = {}
        matching['result_policy']['min_score'] = float(env_min_score)

    # Allow env var override for scoring fan-out
    env_max_workers = os.environ.get("PRO_SCOUT_MAX_WORKERS")
    if env_max_workers:
        if 'scorer' not in matching or matching['scorer'] is None:
            matching['scorer'] = {}
        matching['scorer']['max_workers'] = int(env_max_workers)

    # Allow env var override for similar-professional limit
    env_similar_limit = os.environ.get("PRO_SCOUT_SIMILAR_LIMIT")
    if env_similar_limit:
        if 'similar' not in matching or matching['similar'] is None:
            matching['similar'] = {}
        matching['similar']['limit'] = int(env_similar_limit)

    return AppConfig(**data)
