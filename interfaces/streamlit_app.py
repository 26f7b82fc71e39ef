"""
Streamlit web interface for the score analytics toolkit.

Interactive dashboard with:
- Test data generation controls
- Descriptive statistics
- Histogram and fitted normal curve
- Grade cutoff analysis
- All scores, coloured by cutoff band
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from src.core.analyzer import analyze_sample
from src.core.sampler import generate_scores, make_rng
from src.diagnostics.cutoff import classify_score
from src.utils.constants import (
    CUTOFF_STEP,
    DEFAULT_CACHE_TTL,
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
from src.utils.types import SampleParameters

BAND_BADGES = {"below": "red", "at": "orange", "above": "green"}


@st.cache_data(ttl=DEFAULT_CACHE_TTL)
def cached_analysis(sample: tuple[float, ...], cutoff: float):
    return analyze_sample(sample, cutoff)


st.set_page_config(page_title="Student Test Score Analyzer", layout="wide")

st.title("Student Test Score Analyzer")
st.markdown("Generate test scores and explore their distribution")

# Sidebar parameters
st.sidebar.header("Generate Test Data")
num_students = st.sidebar.number_input(
    "Number of Students", min_value=MIN_STUDENTS, max_value=MAX_STUDENTS, value=DEFAULT_STUDENTS, step=1
)
mean_score = st.sidebar.number_input(
    "Target Mean Score", min_value=SCORE_MIN, max_value=SCORE_MAX, value=DEFAULT_MEAN, step=1.0
)
std_dev = st.sidebar.number_input(
    "Standard Deviation", min_value=MIN_STD_DEV, max_value=MAX_STD_DEV, value=DEFAULT_STD_DEV, step=1.0
)
regenerate = st.sidebar.button("Generate New Data")

try:
    params = SampleParameters(count=int(num_students), mean=float(mean_score), std_dev=float(std_dev))
except ValueError as e:
    st.error(f"Error: {e}")
    st.stop()

# The sample is application state; it changes only on new parameters or an explicit request
if regenerate or st.session_state.get("params") != params:
    st.session_state["params"] = params
    st.session_state["scores"] = generate_scores(params, make_rng())

scores = st.session_state["scores"]

# Statistics and charts render above the cutoff section but depend on the cutoff it reads
results_area = st.container()

st.header("Grade Cutoff Analysis")
cutoff = st.slider(
    "Cutoff Score", min_value=SCORE_MIN, max_value=SCORE_MAX, value=DEFAULT_CUTOFF, step=CUTOFF_STEP
)

snapshot = cached_analysis(scores, cutoff)

classification = snapshot.classification
percents = classification.formatted()
label = format_score(cutoff)

tile1, tile2, tile3 = st.columns(3)
tile1.metric(label=f"Below {label}", value=f"{percents['below']}%",
             delta=f"{classification.below_count} students", delta_color="off")
tile2.metric(label=f"At {label}", value=f"{percents['at']}%",
             delta=f"{classification.at_count} students", delta_color="off")
tile3.metric(label=f"Above {label}", value=f"{percents['above']}%",
             delta=f"{classification.above_count} students", delta_color="off")

with results_area:
    col1, col2 = st.columns([1, 2])

    with col1:
        st.header("Descriptive Statistics")
        if snapshot.summary is None:
            st.info("No data")
        else:
            stats_df = pd.DataFrame(snapshot.summary.display_rows(), columns=["Statistic", "Value"])
            st.table(stats_df.set_index("Statistic"))

    with col2:
        st.header("Score Distribution")

        hist_df = pd.DataFrame(
            {
                "range": [b.range_label for b in snapshot.histogram],
                "count": [b.count for b in snapshot.histogram],
            }
        )
        fig_hist = go.Figure()
        fig_hist.add_trace(go.Bar(x=hist_df["range"], y=hist_df["count"], marker_color="#3b82f6", opacity=0.7))
        fig_hist.update_layout(xaxis_title="Score Range", yaxis_title="Students")
        st.plotly_chart(fig_hist, use_container_width=True)

        st.subheader("Normal Distribution Curve")
        if not snapshot.density:
            st.info("The curve needs at least two distinct scores.")
        else:
            curve_df = pd.DataFrame(
                {
                    "x": [p.x for p in snapshot.density],
                    "y": [p.y for p in snapshot.density],
                    "below": [p.below_cutoff for p in snapshot.density],
                }
            )
            below_df = curve_df[curve_df["below"]]

            fig_curve = go.Figure()
            fig_curve.add_trace(
                go.Scatter(x=curve_df["x"], y=curve_df["y"], name="Normal curve",
                           line=dict(color="#8b5cf6", width=2), fill="tozeroy",
                           fillcolor="rgba(139, 92, 246, 0.15)")
            )
            fig_curve.add_trace(
                go.Scatter(x=below_df["x"], y=below_df["y"], name="Below cutoff",
                           line=dict(color="#8b5cf6", width=0), fill="tozeroy",
                           fillcolor="rgba(139, 92, 246, 0.35)", showlegend=False)
            )
            fig_curve.add_vline(x=cutoff, line=dict(color="#ef4444", width=2, dash="dash"))
            fig_curve.update_layout(xaxis_title="Score", yaxis_title="Students per bin")
            st.plotly_chart(fig_curve, use_container_width=True)

st.header("All Scores")
badges = " ".join(
    f":{BAND_BADGES[classify_score(score, cutoff)]}[{format_score(score)}]"
    for score in snapshot.sample
)
st.markdown(badges)
