import unittest
import os
import yaml
from unittest.mock import patch, mock_open

from pydantic import ValidationError

from pro_scout.config_loader import (
    load_config, AppConfig, MatchingConfig, ScorerConfig, ScorerWeights, SimilarityConfig
)


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "matching": {
                "scorer": {
                    "close_km": 12.5,
                    "max_workers": 2,
                    "weights": {"service_match": 25}
                },
                "result_policy": {"min_score": 50, "top_k": 20},
                "similar": {"limit": 8}
            }
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.matching.scorer.close_km, 12.5)
                self.assertEqual(config.matching.scorer.weights.service_match, 25)
                # Untouched weights keep their defaults
                self.assertEqual(config.matching.scorer.weights.location_very_close, 20)
                self.assertEqual(config.matching.result_policy.min_score, 50)
                self.assertEqual(config.matching.result_policy.top_k, 20)
                self.assertEqual(config.matching.similar.limit, 8)

    def test_empty_file_gives_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy")
                self.assertEqual(config.matching, MatchingConfig())

    def test_env_var_override_min_score(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"PRO_SCOUT_MIN_SCORE": "65"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.matching.result_policy.min_score, 65)
                    self.assertEqual(config.matching.result_policy.top_k, 20)

    def test_env_var_override_workers_and_limit(self):
        with patch("builtins.open", mock_open(read_data="matching:\n")):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"PRO_SCOUT_MAX_WORKERS": "8", "PRO_SCOUT_SIMILAR_LIMIT": "3"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.matching.scorer.max_workers, 8)
                    self.assertEqual(config.matching.similar.limit, 3)

    def test_env_override_with_null_sections(self):
        null_yaml = "matching:\n  result_policy:\n  scorer:\n  similar:\n"
        env = {"PRO_SCOUT_MIN_SCORE": "55", "PRO_SCOUT_MAX_WORKERS": "3", "PRO_SCOUT_SIMILAR_LIMIT": "4"}
        with patch("builtins.open", mock_open(read_data=null_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, env):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.matching.result_policy.min_score, 55)
                    self.assertEqual(config.matching.scorer.max_workers, 3)
                    self.assertEqual(config.matching.similar.limit, 4)

    def test_inverted_similarity_ratios_rejected(self):
        with self.assertRaises(ValidationError):
            SimilarityConfig(budget_floor_ratio=1.3, budget_ceiling_ratio=0.7)

        bad_yaml = yaml.dump({"matching": {"similar": {"budget_floor_ratio": 1.5}}})
        with patch("builtins.open", mock_open(read_data=bad_yaml)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ValidationError):
                    load_config("dummy")

    def test_equal_similarity_ratios_allowed(self):
        config = SimilarityConfig(budget_floor_ratio=1.0, budget_ceiling_ratio=1.0)
        self.assertEqual(config.budget_floor_ratio, config.budget_ceiling_ratio)

    def test_invalid_values_rejected(self):
        bad_yaml = yaml.dump({"matching": {"result_policy": {"min_score": 140}}})
        with patch("builtins.open", mock_open(read_data=bad_yaml)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ValidationError):
                    load_config("dummy")

    def test_defaults_match_standard_policy(self):
        config = MatchingConfig()
        self.assertEqual(config.result_policy.min_score, 40)
        self.assertIsNone(config.result_policy.top_k)
        self.assertEqual(config.similar.limit, 5)
        self.assertEqual(config.similar.budget_floor_ratio, 0.8)
        self.assertEqual(config.similar.budget_ceiling_ratio, 1.2)
        self.assertEqual(config.scorer.budget_tolerance, 1.1)
        self.assertEqual(config.scorer.max_score, 100)
        self.assertEqual(ScorerConfig().weights, ScorerWeights())

    def test_shipped_config_is_defaults(self):
        repo_config = os.path.join(os.path.dirname(__file__), "..", "..", "..", "config.yaml")
        with patch.dict(os.environ, {}, clear=False):
            for var in ("PRO_SCOUT_MIN_SCORE", "PRO_SCOUT_MAX_WORKERS", "PRO_SCOUT_SIMILAR_LIMIT"):
                os.environ.pop(var, None)
            config = load_config(repo_config)
        self.assertEqual(config, AppConfig())


if __name__ == '__main__':
    unittest.main()
