"""Unit tests for end-to-end analysis snapshots."""

import math

from src.core.analyzer import analyze_sample, curve_peak, run_analysis
from src.core.sampler import make_rng


def test_snapshot_is_consistent(default_params, rng):
    """Every output in a snapshot describes the same sample and cutoff."""
    snapshot = run_analysis(default_params, 70.0, rng)

    assert snapshot.parameters == default_params
    assert len(snapshot.sample) == default_params.count
    assert snapshot.summary.count == len(snapshot.sample)
    assert sum(b.count for b in snapshot.histogram) == len(snapshot.sample)
    assert snapshot.classification.total == len(snapshot.sample)
    assert snapshot.classification.cutoff == 70.0
    assert all(p.below_cutoff == (p.x <= 70.0) for p in snapshot.density)


def test_density_fitted_to_summary(quartet):
    """The curve is centred on the sample mean and spans ±4 standard deviations."""
    snapshot = analyze_sample(quartet, 25.0)
    summary = snapshot.summary

    assert abs(snapshot.density[0].x - (summary.mean - 4 * summary.std_dev)) < 1e-9
    assert snapshot.density[-1].x <= summary.mean + 4 * summary.std_dev


def test_sample_sorted_in_snapshot():
    snapshot = analyze_sample([30.0, 10.0, 20.0], 15.0)
    assert snapshot.sample == (10.0, 20.0, 30.0)


def test_curve_peak_in_students_per_bin(quartet):
    """Peak = n × 5 / (σ√(2π))."""
    snapshot = analyze_sample(quartet, 25.0)
    expected = 4 * 5 / (snapshot.summary.std_dev * math.sqrt(2 * math.pi))
    assert abs(curve_peak(snapshot) - expected) < 1e-9


def test_empty_sample_snapshot():
    """No data: no summary, no bins, no curve, zero classification."""
    snapshot = analyze_sample([], 75.0)

    assert snapshot.summary is None
    assert snapshot.histogram == ()
    assert snapshot.density == ()
    assert snapshot.classification.total == 0
    assert curve_peak(snapshot) is None


def test_single_score_has_no_curve():
    """With one score the spread is undefined, so no curve is drawn."""
    snapshot = analyze_sample([80.0], 75.0)

    assert snapshot.summary.count == 1
    assert snapshot.density == ()
    assert len(snapshot.histogram) == 1


def test_identical_scores_have_no_curve():
    snapshot = analyze_sample([70.0, 70.0], 75.0)
    assert snapshot.density == ()


def test_new_cutoff_gives_new_snapshot(default_params):
    """Changing the cutoff re-derives outputs without touching the old snapshot."""
    sample = run_analysis(default_params, 75.0, make_rng(5)).sample
    before = analyze_sample(sample, 75.0)
    after = analyze_sample(sample, 60.0)

    assert before.sample == after.sample
    assert before.classification.cutoff == 75.0
    assert after.classification.cutoff == 60.0
    assert before.summary == after.summary
