"""Unit tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from interfaces.cli import cli, parse_scores


@pytest.fixture
def runner():
    return CliRunner()


def test_parse_scores():
    assert parse_scores("10, 20,30,") == (10.0, 20.0, 30.0)


def test_parse_scores_rejects_garbage():
    with pytest.raises(ValueError, match="Invalid score 'abc'"):
        parse_scores("10,abc")


@pytest.mark.parametrize("text", ["inf,1", "10,nan", "-inf"])
def test_parse_scores_rejects_non_finite(text):
    """Infinite and nan scores are not valid scores."""
    with pytest.raises(ValueError, match="Invalid score"):
        parse_scores(text)


@pytest.mark.parametrize("text", ["-7,50", "50,100.1", "250000"])
def test_parse_scores_rejects_out_of_range(text):
    """Scores must lie in [0, 100]."""
    with pytest.raises(ValueError, match="Score must be between 0 and 100"):
        parse_scores(text)


def test_parse_scores_accepts_bounds():
    assert parse_scores("0,100") == (0.0, 100.0)


def test_generate_is_reproducible(runner):
    """The same seed prints the same sorted sample."""
    first = runner.invoke(cli, ["generate", "--count", "20", "--seed", "11"])
    second = runner.invoke(cli, ["generate", "--count", "20", "--seed", "11"])

    assert first.exit_code == 0
    assert first.output == second.output
    scores = [float(s) for s in first.output.strip().split(", ")]
    assert len(scores) == 20
    assert scores == sorted(scores)


def test_stats_for_explicit_scores(runner):
    result = runner.invoke(cli, ["stats", "--scores", "10,20,30,40"])

    assert result.exit_code == 0
    assert "Mean:" in result.output
    assert "25.00" in result.output
    assert "166.67" in result.output
    assert "No mode" in result.output


def test_histogram_output(runner):
    result = runner.invoke(cli, ["histogram", "--scores", "2,7,7,19"])

    assert result.exit_code == 0
    assert "5-9 | ## 2" in result.output
    assert "10-14 |  0" in result.output


def test_cutoff_output(runner):
    result = runner.invoke(cli, ["cutoff", "--scores", "70,75,75,80", "--cutoff", "75"])

    assert result.exit_code == 0
    assert "Below 75:  25.0% (1 students)" in result.output
    assert "50.0% (2 students)" in result.output


def test_report_output(runner):
    result = runner.invoke(cli, ["report", "--seed", "1", "--cutoff", "60"])

    assert result.exit_code == 0
    for heading in ("Scores:", "Descriptive Statistics:", "Score Distribution:",
                    "Normal Curve:", "Grade Cutoff Analysis (60):"):
        assert heading in result.output


def test_report_single_score_has_no_curve(runner):
    result = runner.invoke(cli, ["report", "--scores", "80"])

    assert result.exit_code == 0
    assert "undefined" in result.output


def test_bad_scores_exit_nonzero(runner):
    result = runner.invoke(cli, ["stats", "--scores", "ten"])

    assert result.exit_code != 0
    assert "Invalid score" in result.output


def test_infinite_score_reported_as_error(runner):
    """An infinite score is a usage error, not a crash."""
    result = runner.invoke(cli, ["stats", "--scores", "inf,1"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, OverflowError)
    assert "Error: Invalid score 'inf'" in result.output


def test_out_of_range_score_reported_as_error(runner):
    """Scores outside [0, 100] are rejected before any bins are built."""
    result = runner.invoke(cli, ["histogram", "--scores", "-7,250000"])

    assert result.exit_code == 1
    assert "Score must be between 0 and 100" in result.output
    assert "Score Distribution" not in result.output


def test_count_out_of_range_rejected(runner):
    result = runner.invoke(cli, ["generate", "--count", "1000"])
    assert result.exit_code != 0
