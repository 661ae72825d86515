# bigo_visualizer.py
from dataclasses import asdict

import streamlit as st

from bigo import (
    GROWTH_FUNCTIONS,
    ExpressionError,
    ParameterStore,
    build_figure,
    check_witness,
    classify,
    compile_expression,
    generate,
    resolve,
)
from bigo.config import (
    C_RANGE,
    F_PLACEHOLDER,
    MAX_N_RANGE,
    N0_RANGE,
    NOTES_TEXT,
    NOTES_URL,
    PAGE_TITLE,
)

# --------------------------
# Page config and title
# --------------------------
st.set_page_config(layout="wide", page_title=PAGE_TITLE)
st.title("📈 Big-O Visualizer")
st.markdown(
    "f(n) = O(g(n)) when there are constants `c > 0` and `n0` with `f(n) ≤ c·g(n)` for all `n ≥ n0`. "
    "Move `c` and `n0` until the dashed line stays above f(n)."
)

# --------------------------
# Parameter store, one per browser session
# --------------------------
if "store" not in st.session_state:
    st.session_state["store"] = ParameterStore()
    for field, value in asdict(st.session_state["store"].params).items():
        st.session_state[f"param_{field}"] = value
store: ParameterStore = st.session_state["store"]


def on_change(field: str):
    store.update(field, st.session_state[f"param_{field}"])


# --------------------------
# Inputs
# --------------------------
controls, chart_area = st.columns(2)

with controls:
    st.header("Configure f(n), c and n0 for g(n)")
    st.text_input(
        "Enter f(n) expression", key="param_f_expr", placeholder=F_PLACEHOLDER,
        on_change=on_change, args=("f_expr",),
    )
    st.selectbox(
        "Select g(n) type", options=list(GROWTH_FUNCTIONS), key="param_g_type",
        format_func=lambda key: GROWTH_FUNCTIONS[key].label,
        on_change=on_change, args=("g_type",),
    )
    st.slider(
        "c (constant multiplier)", min_value=C_RANGE.lo, max_value=C_RANGE.hi, step=C_RANGE.step,
        key="param_c", on_change=on_change, args=("c",),
    )
    st.slider(
        "n₀ (threshold)", min_value=int(N0_RANGE.lo), max_value=int(N0_RANGE.hi), step=int(N0_RANGE.step),
        key="param_n0", on_change=on_change, args=("n0",),
    )
    st.slider(
        "Max input size (n)", min_value=int(MAX_N_RANGE.lo), max_value=int(MAX_N_RANGE.hi),
        step=int(MAX_N_RANGE.step), key="param_max_n", on_change=on_change, args=("max_n",),
    )
    st.markdown(
        "Operators `+ - * / % ^`, constants `pi`, `e`, functions `log`, `log2`, `log10`, `ln`, `sqrt`, "
        "`cbrt`, `exp`, `pow`, `abs`, `floor`, `ceil`, `factorial`. `Math.log2(n)` style also works."
    )
    st.markdown(f"[{NOTES_TEXT}]({NOTES_URL})")

params = store.params

# --------------------------
# Visualization
# --------------------------
try:
    compile_expression(params.f_expr)
except ExpressionError as e:
    controls.warning(f"Could not parse `{params.f_expr}`: {e}. f(n) is not drawn.")

data = generate(params)
with chart_area:
    st.plotly_chart(build_figure(data), use_container_width=True)

# --------------------------
# Display textual results
# --------------------------
st.subheader("Analysis")
growth = resolve(params.g_type)
yesno = lambda v: "?" if v is None else ("Yes" if v else "No")

st.markdown(f"### 🔹 `f(n) = {params.f_expr}` against `{growth.label}`")

report = check_witness(data)
if report.holds is None:
    st.markdown(f"- **Witness check**: no plotted point with `n ≥ {params.n0}` has a value for f(n).")
elif report.holds:
    st.markdown(
        f"- **Witness check**: `f(n) ≤ {params.c:g}·g(n)` for every plotted `n ≥ {params.n0}` "
        f"({report.checked} points)."
    )
else:
    hint = f" Try `n0 = {report.suggested_n0}` or a larger `c`." if report.suggested_n0 else " Try a larger `c`."
    st.markdown(
        f"- **Witness check**: fails first at `n = {report.first_violation}`, "
        f"where f(n) > {params.c:g}·g(n).{hint}"
    )
if report.skipped:
    st.markdown(f"  - {report.skipped} point(s) skipped because f(n) is undefined there.")

classification = classify(params.f_expr, params.g_type)
if classification.determined:
    st.markdown(f"- symbolic `lim_{'{n->∞}'} f(n)/g(n)` = `{classification.limit}`")
    st.markdown(
        f"  - f = O(g)? {yesno(classification.O)}, Θ? {yesno(classification.Theta)}, "
        f"Ω? {yesno(classification.Omega)}, o? {yesno(classification.o)}"
    )
elif classification.limit is not None:
    st.markdown(f"- symbolic limit is `{classification.limit}`; no classification.")
else:
    st.markdown("- symbolic limit could not be determined.")

st.markdown("- **Example algorithms with this growth:**")
for ex in growth.examples:
    st.markdown(f"  - {ex}")
