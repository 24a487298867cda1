import logging
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from typing import Dict, Iterable, Optional, Tuple
from ..core.combinations import Combination, CombinationResult, Matched
from ..core.dice import Hand
from ..core.game import Game
from ..simulation import SimulationResult


console = Console()


def setup_logging(verbose: bool = False):
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def display_round(
    hand: Hand,
    results: Dict[Combination, CombinationResult],
    award: Optional[Tuple[Combination, int]],
):
    """Display every available combination for a hand and the award."""
    table = Table(title=f"Hand {hand}")
    table.add_column("Combination", style="cyan")
    table.add_column("Result", style="magenta")
    table.add_column("Score", style="yellow", justify="right")

    for combination, result in results.items():
        if isinstance(result, Matched):
            table.add_row(combination.display_name, "matched", str(result.score))
        else:
            table.add_row(combination.display_name, "[dim]not matched[/dim]", "-")

    console.print(table)

    if award is None:
        console.print("[red]No available combination matches this hand.[/red]")
    else:
        combination, score = award
        console.print(f"\n[bold green]Awarded {combination.display_name}: {score} points[/bold green]")


def display_game(game: Game):
    """Display each round of a finished game and its total."""
    table = Table(title="Game Rounds")
    table.add_column("Round", style="cyan", justify="right")
    table.add_column("Hand", style="magenta")
    table.add_column("Combination", style="green")
    table.add_column("Score", style="yellow", justify="right")

    for result in game.round_history:
        combination = result.combination.display_name if result.awarded else "[dim]none[/dim]"
        table.add_row(str(result.round_number), str(result.hand), combination, str(result.score))

    console.print(table)

    unused = ", ".join(c.display_name for c in game.unused_combinations) or "None"
    console.print(Panel(
        f"[bold]Total score:[/bold] {game.total_score}\n"
        f"[cyan]Unused combinations:[/cyan] {unused}",
        title="Game Over",
        border_style="blue",
    ))


def show_simulation_results(sim_result: SimulationResult):
    """Display simulation results."""
    console.print(
        f"\n[bold cyan]Simulation Results[/bold cyan] "
        f"({sim_result.num_games} games, {sim_result.rounds_per_game} rounds each)"
    )

    stats = Table(title="Score Statistics")
    stats.add_column("Metric", style="cyan")
    stats.add_column("Value", style="green", justify="right")
    stats.add_row("Expected Score", f"{sim_result.expected_value:.1f}")
    stats.add_row("Std Deviation", f"{sim_result.std_deviation:.1f}")
    for p, value in sorted(sim_result.percentiles.items()):
        stats.add_row(f"{p}th Percentile", f"{value:.1f}")
    stats.add_row("Rounds Without Award", str(sim_result.no_award_rounds))
    console.print(stats)

    usage = Table(title="Combination Usage")
    usage.add_column("Combination", style="cyan")
    usage.add_column("Games", style="yellow", justify="right")
    usage.add_column("", style="magenta")
    for combination, rate in sim_result.usage_rates.items():
        bar = "█" * int(40 * rate)
        usage.add_row(combination.display_name, f"{rate:.1%}", bar)
    console.print(usage)


def format_combinations(combinations: Iterable[Combination]) -> str:
    return ", ".join(c.display_name for c in combinations)
