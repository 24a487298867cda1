"""
Tests for the Monte Carlo game simulator.
"""
import numpy as np
import pytest
from yams.core.combinations import Combination
from yams.simulation import GameSimulator, SimulationConfig


class TestSimulationConfig:

    def test_defaults(self):
        config = SimulationConfig()
        assert config.rounds_per_game == len(Combination)
        assert config.num_workers >= 1

    @pytest.mark.parametrize("kwargs", [
        {"num_games": 0},
        {"rounds_per_game": -1},
        {"num_workers": 0},
    ])
    def test_invalid_values_are_rejected(self, kwargs):
        with pytest.raises(ValueError):
            SimulationConfig(**kwargs)


class TestGameSimulator:

    def get_simulator(self):
        return GameSimulator()

    def test_scores_stay_within_bounds(self):
        config = SimulationConfig(num_games=300, seed=3, num_workers=1)
        result = self.get_simulator().simulate_games(config)

        assert result.num_games == 300
        assert len(result.score_distribution) == 300
        # at least Chance (5) for one round; at most every fixed score plus 30 for Chance
        assert result.score_distribution.min() >= 5
        assert result.score_distribution.max() <= 50 + 40 + 35 + 30 + 28 + 30
        assert result.percentiles[25] <= result.percentiles[50] <= result.percentiles[75]

    def test_usage_rates(self):
        config = SimulationConfig(num_games=300, seed=3, num_workers=1)
        result = self.get_simulator().simulate_games(config)

        assert set(result.usage_rates) == set(Combination)
        assert all(0 <= rate <= 1 for rate in result.usage_rates.values())
        # Chance always matches, so it is awarded in every six-round game
        assert result.usage_rates[Combination.CHANCE] == pytest.approx(1.0)
        rounds = result.num_games * result.rounds_per_game
        awarded = sum(result.usage_rates.values()) * result.num_games
        assert awarded + result.no_award_rounds == pytest.approx(rounds)

    def test_same_seed_same_result(self):
        config = SimulationConfig(num_games=200, seed=11, num_workers=1)
        first = self.get_simulator().simulate_games(config)
        second = self.get_simulator().simulate_games(config)
        assert np.array_equal(first.score_distribution, second.score_distribution)
        assert first.expected_value == second.expected_value

    def test_parallel_workers(self):
        config = SimulationConfig(num_games=2500, seed=5, num_workers=2)
        result = self.get_simulator().simulate_games(config)
        assert len(result.score_distribution) == 2500

        again = self.get_simulator().simulate_games(config)
        assert np.array_equal(result.score_distribution, again.score_distribution)

    def test_seed_gives_same_result_for_any_worker_count(self):
        simulator = self.get_simulator()
        single = simulator.simulate_games(SimulationConfig(num_games=2500, seed=9, num_workers=1))
        parallel = simulator.simulate_games(SimulationConfig(num_games=2500, seed=9, num_workers=3))
        assert np.array_equal(single.score_distribution, parallel.score_distribution)
        assert single.usage_rates == parallel.usage_rates
        assert single.no_award_rounds == parallel.no_award_rounds

    def test_zero_rounds(self):
        config = SimulationConfig(num_games=10, rounds_per_game=0, seed=1, num_workers=1)
        result = self.get_simulator().simulate_games(config)
        assert result.expected_value == 0
        assert result.no_award_rounds == 0

    def test_str_lists_every_combination(self):
        config = SimulationConfig(num_games=20, seed=1, num_workers=1)
        text = str(self.get_simulator().simulate_games(config))
        for combination in Combination:
            assert combination.display_name in text
