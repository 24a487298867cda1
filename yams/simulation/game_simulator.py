"""Monte Carlo simulation of Yams games played with random hands."""
import numpy as np
from typing import List, Dict, Optional, Tuple
from dataclasses import dataclass, field
from concurrent.futures import ProcessPoolExecutor
import logging
import multiprocessing
from ..core.combinations import Combination
from ..core.dice import HAND_SIZE, Hand
from ..core.game import Game


logger = logging.getLogger(__name__)

GAMES_PER_BATCH = 1000


@dataclass
class SimulationConfig:
    """Configuration for a batch of simulated games."""
    num_games: int = 10000
    rounds_per_game: int = len(Combination)
    seed: Optional[int] = None
    num_workers: int = field(default_factory=multiprocessing.cpu_count)

    def __post_init__(self):
        if self.num_games < 1:
            raise ValueError(f"num_games must be positive, got {self.num_games}")
        if self.rounds_per_game < 0:
            raise ValueError(f"rounds_per_game cannot be negative, got {self.rounds_per_game}")
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {self.num_workers}")


@dataclass
class SimulationResult:
    """Results from simulated games."""
    num_games: int
    rounds_per_game: int
    expected_value: float
    std_deviation: float
    percentiles: Dict[int, float]
    score_distribution: np.ndarray
    usage_rates: Dict[Combination, float]  # Combination -> share of games awarding it
    no_award_rounds: int

    def __str__(self) -> str:
        lines = [f"Simulation Results ({self.num_games} games, {self.rounds_per_game} rounds each):"]
        lines.append(f"  Expected Score: {self.expected_value:.1f}")
        lines.append(f"  Std Deviation: {self.std_deviation:.1f}")
        for p in (25, 50, 75):
            lines.append(f"  {p}th Percentile: {self.percentiles[p]:.1f}")
        lines.append(f"  Rounds Without Award: {self.no_award_rounds}")
        lines.append("\nCombination Usage:")
        for combination in Combination:
            lines.append(f"  {combination.display_name}: {self.usage_rates[combination]:.1%}")
        return "\n".join(lines)


class GameSimulator:
    """Plays batches of random games and summarises their scores."""

    def simulate_games(self, config: Optional[SimulationConfig] = None) -> SimulationResult:
        """Simulate `config.num_games` games of random hands."""
        config = config or SimulationConfig()
        # batches and their seeds depend only on num_games, never on num_workers
        batch_sizes = [
            min(GAMES_PER_BATCH, config.num_games - start)
            for start in range(0, config.num_games, GAMES_PER_BATCH)
        ]
        seeds = np.random.SeedSequence(config.seed).spawn(len(batch_sizes))
        num_workers = min(config.num_workers, len(batch_sizes))

        logger.debug(
            "Simulating %d games in %d batches across %d workers",
            config.num_games, len(batch_sizes), num_workers,
        )

        if num_workers == 1:
            batches = [
                self._run_simulations(n_games, config.rounds_per_game, seed)
                for n_games, seed in zip(batch_sizes, seeds)
            ]
        else:
            with ProcessPoolExecutor(max_workers=num_workers) as executor:
                futures = [
                    executor.submit(self._run_simulations, n_games, config.rounds_per_game, seed)
                    for n_games, seed in zip(batch_sizes, seeds)
                ]
                # collected in submission order so a seed always yields the same distribution
                batches = [future.result() for future in futures]

        all_scores: List[int] = []
        usage_counts = {c: 0 for c in Combination}
        no_award_rounds = 0
        for scores, usage, no_award in batches:
            all_scores.extend(scores)
            for name, count in usage.items():
                usage_counts[Combination(name)] += count
            no_award_rounds += no_award

        scores_array = np.array(all_scores)
        return SimulationResult(
            num_games=config.num_games,
            rounds_per_game=config.rounds_per_game,
            expected_value=float(np.mean(scores_array)),
            std_deviation=float(np.std(scores_array)),
            percentiles={
                p: float(np.percentile(scores_array, p)) for p in (5, 25, 50, 75, 95)
            },
            score_distribution=scores_array,
            usage_rates={c: count / config.num_games for c, count in usage_counts.items()},
            no_award_rounds=no_award_rounds,
        )

    @staticmethod
    def _run_simulations(
        num_games: int,
        rounds_per_game: int,
        seed: np.random.SeedSequence,
    ) -> Tuple[List[int], Dict[str, int], int]:
        """Run simulations in a single process."""
        rng = np.random.default_rng(seed)
        rolls = rng.integers(1, 7, size=(num_games, rounds_per_game, HAND_SIZE))

        scores = []
        usage: Dict[str, int] = {}
        no_award = 0
        game = Game()
        for game_rolls in rolls:
            game.reset()
            for values in game_rolls:
                result = game.play_round(Hand(tuple(values)))
                if result.awarded:
                    usage[result.combination.value] = usage.get(result.combination.value, 0) + 1
                else:
                    no_award += 1
            scores.append(game.total_score)

        return scores, usage, no_award
