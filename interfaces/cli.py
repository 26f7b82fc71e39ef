"""
Command-line interface for the score analytics toolkit.

This CLI provides access to:
- Score generation (Box-Muller normal sample)
- Descriptive statistics
- Histogram
- Grade cutoff analysis
- A combined report
"""

import logging
import math

import click

from src.core.analyzer import analyze_sample, curve_peak
from src.core.sampler import generate_scores, make_rng
from src.utils.constants import (
    DEFAULT_CUTOFF,
    DEFAULT_MEAN,
    DEFAULT_STD_DEV,
    DEFAULT_STUDENTS,
    MAX_STD_DEV,
    MAX_STUDENTS,
    MIN_STD_DEV,
    MIN_STUDENTS,
    SCORE_MAX,
    SCORE_MIN,
)
from src.utils.formatting import format_score
from src.utils.types import AnalysisSnapshot, SampleParameters


def parse_scores(text: str) -> tuple[float, ...]:
    """Parse a comma-separated list of scores in [0, 100]."""
    scores = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            score = float(item)
        except ValueError:
            raise ValueError(f"Invalid score {item!r}") from None
        if not math.isfinite(score):
            raise ValueError(f"Invalid score {item!r}")
        if not SCORE_MIN <= score <= SCORE_MAX:
            raise ValueError(
                f"Score must be between {format_score(SCORE_MIN)} and {format_score(SCORE_MAX)}, got {item!r}"
            )
        scores.append(score)
    if not scores:
        raise ValueError("No scores given")
    return tuple(scores)


def sample_options(func):
    """Options shared by every command that needs a sample."""
    options = [
        click.option("--count", "-n", type=click.IntRange(MIN_STUDENTS, MAX_STUDENTS),
                     default=DEFAULT_STUDENTS, show_default=True, help="Number of students"),
        click.option("--mean", "-m", type=click.FloatRange(SCORE_MIN, SCORE_MAX),
                     default=DEFAULT_MEAN, show_default=True, help="Target mean score"),
        click.option("--std", "-s", type=click.FloatRange(MIN_STD_DEV, MAX_STD_DEV),
                     default=DEFAULT_STD_DEV, show_default=True, help="Standard deviation"),
        click.option("--seed", type=int, default=None, help="Random seed for reproducible samples"),
        click.option("--scores", type=str, default=None,
                     help="Comma-separated scores to analyze instead of generating"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_snapshot(count, mean, std, seed, scores, cutoff=DEFAULT_CUTOFF) -> AnalysisSnapshot:
    """Analyze explicit scores, or a freshly generated sample."""
    try:
        if scores is not None:
            return analyze_sample(parse_scores(scores), cutoff)
        params = SampleParameters(count=count, mean=mean, std_dev=std)
        sample = generate_scores(params, make_rng(seed))
        return analyze_sample(sample, cutoff, params)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def echo_stats(snapshot: AnalysisSnapshot) -> None:
    click.echo("\nDescriptive Statistics:")
    if snapshot.summary is None:
        click.echo("  No data")
        return
    for label, value in snapshot.summary.display_rows():
        click.echo(f"  {label + ':':<22}{value:>10}")


def echo_histogram(snapshot: AnalysisSnapshot) -> None:
    click.echo("\nScore Distribution:")
    for score_bin in snapshot.histogram:
        click.echo(f"  {score_bin.range_label:>8} | {'#' * score_bin.count} {score_bin.count}")


def echo_cutoff(snapshot: AnalysisSnapshot) -> None:
    classification = snapshot.classification
    percents = classification.formatted()
    cutoff = format_score(classification.cutoff)
    click.echo(f"\nGrade Cutoff Analysis ({cutoff}):")
    click.echo(f"  Below {cutoff}: {percents['below']:>5}% ({classification.below_count} students)")
    click.echo(f"  At {cutoff}:    {percents['at']:>5}% ({classification.at_count} students)")
    click.echo(f"  Above {cutoff}: {percents['above']:>5}% ({classification.above_count} students)")


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Score Analytics Toolkit - descriptive statistics for test scores."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@sample_options
def generate(count, mean, std, seed, scores):
    """Generate a sorted sample of scores."""
    snapshot = build_snapshot(count, mean, std, seed, scores)
    click.echo(", ".join(format_score(score) for score in snapshot.sample))


@cli.command()
@sample_options
def stats(count, mean, std, seed, scores):
    """Show descriptive statistics."""
    echo_stats(build_snapshot(count, mean, std, seed, scores))


@cli.command()
@sample_options
def histogram(count, mean, std, seed, scores):
    """Show the score histogram (5-point bins)."""
    echo_histogram(build_snapshot(count, mean, std, seed, scores))


@cli.command()
@sample_options
@click.option("--cutoff", "-c", type=click.FloatRange(SCORE_MIN, SCORE_MAX),
              default=DEFAULT_CUTOFF, show_default=True, help="Cutoff score")
def cutoff(count, mean, std, seed, scores, cutoff):
    """Show the share of scores below, at and above a cutoff."""
    echo_cutoff(build_snapshot(count, mean, std, seed, scores, cutoff))


@cli.command()
@sample_options
@click.option("--cutoff", "-c", type=click.FloatRange(SCORE_MIN, SCORE_MAX),
              default=DEFAULT_CUTOFF, show_default=True, help="Cutoff score")
def report(count, mean, std, seed, scores, cutoff):
    """Show statistics, histogram, fitted curve and cutoff analysis."""
    snapshot = build_snapshot(count, mean, std, seed, scores, cutoff)

    click.echo("\nScores: " + ", ".join(format_score(score) for score in snapshot.sample))
    echo_stats(snapshot)
    echo_histogram(snapshot)

    peak = curve_peak(snapshot)
    if peak is None:
        click.echo("\nNormal Curve: undefined (needs at least two distinct scores)")
    else:
        click.echo(f"\nNormal Curve: {len(snapshot.density)} points, peak {peak:.2f} students per bin")

    echo_cutoff(snapshot)


if __name__ == "__main__":
    cli()
