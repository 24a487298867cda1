import click
from typing import Optional, Tuple
from ..core.combinations import Combination
from ..core.dice import Dice, Hand, InvalidHandError
from ..core.game import Game
from ..core.scoring import evaluate_all, score_round
from ..simulation import GameSimulator, SimulationConfig
from .interface import (
    console, display_game, display_round, format_combinations, setup_logging,
    show_simulation_results,
)


def _parse_dice(ctx, param, value):
    try:
        return Hand(value)
    except InvalidHandError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def _parse_hands(ctx, param, value):
    try:
        return tuple(Hand.parse(text) for text in value)
    except InvalidHandError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def _parse_combinations(ctx, param, value):
    try:
        return tuple(Combination.from_name(name) for name in value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.version_option(package_name='yams-scorer')
def main(verbose):
    """Yams - score dice hands and whole games."""
    setup_logging(verbose)


@main.command()
@click.argument('dice', nargs=5, type=int, callback=_parse_dice)
@click.option('--used', '-u', multiple=True, callback=_parse_combinations,
              help='Combination already used this game (repeatable)')
def score(dice: Hand, used: Tuple[Combination, ...]):
    """Score a single hand of five DICE."""
    _score_hand(dice, used)


@main.command()
@click.option('--seed', '-s', type=int, help='Random seed for a repeatable roll')
@click.option('--used', '-u', multiple=True, callback=_parse_combinations,
              help='Combination already used this game (repeatable)')
def roll(seed: Optional[int], used: Tuple[Combination, ...]):
    """Roll five random dice and score them."""
    hand = Dice(seed).roll()
    console.print(f"Rolled {hand}")
    _score_hand(hand, used)


def _score_hand(hand: Hand, used: Tuple[Combination, ...]):
    available = [c for c in Combination if c not in used]
    if used:
        console.print(f"[dim]Already used: {format_combinations(used)}[/dim]")
    display_round(hand, evaluate_all(hand, available), score_round(hand, available))


@main.command()
@click.argument('hands', nargs=-1, required=True, callback=_parse_hands)
def game(hands: Tuple[Hand, ...]):
    """Score a game, one HAND per round (e.g. 33325 44441)."""
    yams_game = Game()
    yams_game.play(hands)
    display_game(yams_game)


@main.command()
@click.option('--games', '-n', type=click.IntRange(min=1), default=10000, show_default=True,
              help='Number of games to simulate')
@click.option('--rounds', '-r', type=click.IntRange(min=0), default=len(Combination), show_default=True,
              help='Rounds played per game')
@click.option('--seed', '-s', type=int, help='Random seed; results repeat for any --workers value')
@click.option('--workers', '-w', type=click.IntRange(min=1), help='Worker processes (default: CPU count)')
def simulate(games: int, rounds: int, seed: Optional[int], workers: Optional[int]):
    """Simulate games of random hands and report score statistics."""
    config = SimulationConfig(num_games=games, rounds_per_game=rounds, seed=seed)
    if workers:
        config.num_workers = workers

    with console.status(f"[bold green]Simulating {games:,} games..."):
        sim_result = GameSimulator().simulate_games(config)

    show_simulation_results(sim_result)


if __name__ == "__main__":
    main()
