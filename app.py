"""
Power Lottery Predictor -- Streamlit Web Application

Upload (or point at) a draw-history workbook, pick an analysis method and
inspect the main / special number distributions, the suggested numbers and a
walk-forward backtest.
"""
import io
import os
import sys
import warnings

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
warnings.filterwarnings("ignore")

from powerlotto.backtester import run_backtest
from powerlotto.loader import DataFileError, DataRangeError, load_records, records_to_frame
from powerlotto.models.frequency import observed_counts
from powerlotto.predictor import METHOD_LABELS, AnalysisMethod, compare_methods, predict
from powerlotto.records import NumberDomain

# -- Page Config ----------------------------------------------------------

st.set_page_config(
    page_title="Power Lottery Predictor",
    page_icon="🎱",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: 700;
        text-align: center;
        padding: 1rem 0;
        background: linear-gradient(90deg, #FF6B6B, #FFE66D, #4ECDC4);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
    }
    .ball {
        display: inline-block;
        width: 48px;
        height: 48px;
        line-height: 48px;
        border-radius: 50%;
        text-align: center;
        font-weight: 700;
        margin: 4px;
        background: #3498DB;
        color: white;
    }
    .ball-special { background: #E74C3C; }
    .ball-cold { background: #5D6D7E; }
</style>
""", unsafe_allow_html=True)


# -- Data -----------------------------------------------------------------

@st.cache_data(ttl=3600)
def get_records(data, name, count):
    buf = io.BytesIO(data)
    buf.name = name
    return load_records(buf, count=count)


def _balls(numbers, css="ball"):
    return "".join(f'<span class="{css}">{n}</span>' for n in numbers)


def _distribution_chart(probs, highlight, title):
    numbers = sorted(probs)
    colors = ["#2ECC71" if n in highlight else "#3498DB" for n in numbers]
    fig = go.Figure(go.Bar(
        x=numbers,
        y=[probs[n] for n in numbers],
        marker_color=colors,
        hovertemplate="Number %{x}<br>Probability: %{y:.2%}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Number",
        yaxis_title="Probability",
        yaxis_tickformat=".1%",
        template="plotly_dark",
        height=380,
    )
    return fig


# -- Sidebar --------------------------------------------------------------

st.sidebar.markdown("## Power Lottery Predictor")

uploaded = st.sidebar.file_uploader("Draw history (.xlsx or .csv)", type=["xlsx", "csv"])
path = st.sidebar.text_input("...or a local file path")
count = st.sidebar.number_input("Draws to load", min_value=1, max_value=1000, value=100, step=10)

method = st.sidebar.radio(
    "Analysis method",
    list(AnalysisMethod),
    format_func=lambda m: METHOD_LABELS[m],
)

page = st.sidebar.radio("Navigate", ["Prediction", "Method Comparison", "Backtest", "History"])

st.sidebar.markdown("---")
st.sidebar.markdown(
    "**Disclaimer:** Draws are random. These are summaries of past data, "
    "not forecasts."
)


# -- Load Data ------------------------------------------------------------

if uploaded is not None:
    data, name = uploaded.getvalue(), uploaded.name
elif path:
    try:
        with open(path, "rb") as fh:
            data, name = fh.read(), path
    except OSError as e:
        st.error(f"Could not read {path}: {e}")
        st.stop()
else:
    st.markdown('<div class="main-header">Power Lottery Predictor</div>', unsafe_allow_html=True)
    st.info("Upload a workbook with six main numbers in columns A-F and the special number in G.")
    st.stop()

try:
    records = get_records(data, name, int(count))
except (DataFileError, DataRangeError) as e:
    st.error(f"Invalid data: {e}")
    st.stop()

if not records:
    st.warning("The file holds no draws.")


# ==========================================================================
# PAGE 1: PREDICTION
# ==========================================================================

if page == "Prediction":
    st.markdown(f'<div class="main-header">{METHOD_LABELS[method]}</div>', unsafe_allow_html=True)

    result = predict(records, method)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Draws used", len(records))
    with col2:
        st.metric("Draws with special", sum(1 for r in records if r.has_special))
    with col3:
        st.metric("Main mass", f"{sum(result['main_probabilities'].values()):.3f}")

    st.subheader("Suggested numbers")
    st.markdown(
        _balls(result["predicted_main"]) + _balls([result["predicted_special"]], "ball ball-special"),
        unsafe_allow_html=True,
    )
    st.subheader("Least likely numbers")
    st.markdown(
        _balls(result["least_likely_main"], "ball ball-cold")
        + _balls([result["least_likely_special"]], "ball ball-cold"),
        unsafe_allow_html=True,
    )

    st.plotly_chart(
        _distribution_chart(result["main_probabilities"], set(result["predicted_main"]),
                            "Main number probabilities (1-38)"),
        use_container_width=True,
    )
    st.plotly_chart(
        _distribution_chart(result["special_probabilities"], {result["predicted_special"]},
                            "Special number probabilities (1-8)"),
        use_container_width=True,
    )
    if method == AnalysisMethod.TIME_SERIES:
        st.caption("AR(1) values are per-number probabilities and do not sum to 1.")


# ==========================================================================
# PAGE 2: METHOD COMPARISON
# ==========================================================================

elif page == "Method Comparison":
    st.markdown('<div class="main-header">Method Comparison</div>', unsafe_allow_html=True)

    rows = []
    for m, res in compare_methods(records).items():
        rows.append({
            "Method": METHOD_LABELS[m],
            "Predicted main": ", ".join(str(n) for n in res["predicted_main"]),
            "Special": res["predicted_special"],
            "Least likely main": ", ".join(str(n) for n in res["least_likely_main"]),
            "Least likely special": res["least_likely_special"],
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True)


# ==========================================================================
# PAGE 3: BACKTEST
# ==========================================================================

elif page == "Backtest":
    st.markdown('<div class="main-header">Walk-Forward Backtest</div>', unsafe_allow_html=True)

    min_history = st.slider("Minimum history per prediction", 1, 50, 10)
    if st.button("Run backtest"):
        with st.spinner("Backtesting every method..."):
            summary = run_backtest(records, min_history=min_history, seed=0, verbose=False)

        rows = [{
            "Method": METHOD_LABELS[m],
            "Avg matches": round(s.get("avg_matches", 0), 3),
            "Best single": s.get("best_single", 0),
            "Special hits": s.get("special_hits", 0),
            "Draws": s.get("total_draws", 0),
        } for m, s in summary["methods"].items()]
        rows.append({
            "Method": "Random baseline",
            "Avg matches": round(summary["random"]["avg_matches"], 3),
            "Best single": None,
            "Special hits": None,
            "Draws": summary["random"]["total_draws"],
        })
        st.dataframe(pd.DataFrame(rows), use_container_width=True)

        sig = summary.get("significance")
        if sig:
            st.metric(f"p-value ({METHOD_LABELS[sig['method']]} vs random)", sig["p_value"])


# ==========================================================================
# PAGE 4: HISTORY
# ==========================================================================

elif page == "History":
    st.markdown('<div class="main-header">Draw History</div>', unsafe_allow_html=True)
    st.dataframe(records_to_frame(records), use_container_width=True, height=500)

    counts = observed_counts(records, NumberDomain.MAIN)
    st.subheader("Main number counts")
    st.bar_chart(pd.Series(counts, name="Count"))
