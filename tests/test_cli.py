"""
Tests for the command line interface.
"""
from click.testing import CliRunner
from yams.cli.__main__ import main


def run(*args):
    return CliRunner().invoke(main, list(args))


class TestScoreCommand:

    def test_scores_hand(self):
        result = run("score", "3", "3", "3", "2", "5")
        assert result.exit_code == 0
        assert "Awarded Three of a Kind: 28 points" in result.output

    def test_used_combinations_are_skipped(self):
        result = run("score", "2", "2", "3", "3", "3", "--used", "full_house")
        assert result.exit_code == 0
        assert "Awarded Three of a Kind: 28 points" in result.output

    def test_no_award(self):
        result = run("score", "1", "2", "3", "4", "6", "-u", "chance")
        assert result.exit_code == 0
        assert "No available combination" in result.output

    def test_out_of_range_die(self):
        result = run("score", "1", "2", "3", "4", "9")
        assert result.exit_code == 2
        assert "between 1 and 6" in result.output

    def test_unknown_combination(self):
        result = run("score", "1", "2", "3", "4", "5", "--used", "pair")
        assert result.exit_code == 2
        assert "Unknown combination" in result.output


class TestGameCommand:

    def test_reference_game(self):
        result = run("game", "33325", "44441", "22333", "12345", "12346")
        assert result.exit_code == 0
        assert "Total score: 149" in result.output

    def test_bad_hand(self):
        result = run("game", "33325", "4444")
        assert result.exit_code == 2

    def test_requires_a_hand(self):
        result = run("game")
        assert result.exit_code == 2


class TestSimulateCommand:

    def test_simulate(self):
        result = run("simulate", "--games", "50", "--seed", "1", "--workers", "1")
        assert result.exit_code == 0
        assert "Expected Score" in result.output
        assert "Combination Usage" in result.output

    def test_rejects_zero_games(self):
        result = run("simulate", "--games", "0")
        assert result.exit_code == 2


class TestRollCommand:

    def test_roll_scores_a_hand(self):
        result = run("roll", "--seed", "4")
        assert result.exit_code == 0
        assert "Rolled" in result.output
        assert "Awarded" in result.output

    def test_same_seed_same_roll(self):
        assert run("roll", "-s", "8").output == run("roll", "-s", "8").output

    def test_roll_without_chance(self):
        result = run("roll", "-s", "2", "-u", "chance", "-u", "yams")
        assert result.exit_code == 0
        assert "Already used: Chance, Yams" in result.output


class TestVerboseLogging:

    def test_verbose_logs_each_award(self):
        result = run("-v", "game", "66666", "12345")
        assert result.exit_code == 0
        assert "DEBUG" in result.output
        assert "awarded" in result.output

    def test_quiet_by_default(self):
        result = run("game", "66666", "12345")
        assert result.exit_code == 0
        assert "DEBUG" not in result.output
        assert "awarded" not in result.output
