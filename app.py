import streamlit as st
import pandas as pd

from surebet.config import get_profile, setup_logging
from surebet.engine import InvalidOutcomeError, recompute
from surebet.models import PROFILES, Outcome
from surebet.validation import MIN_ROWS, pad_rows, validate_session

setup_logging()

# ── Page config ──────────────────────────────────────────────────────────
st.set_page_config(page_title="Calculadora de surebet", page_icon="🎯", layout="centered")
st.markdown("# 🎯 Calculadora de surebet")

# ── Profile ───────────────────────────────────────────────────────────────
default_profile = get_profile()
names = list(PROFILES)
picked = st.sidebar.selectbox("Perfil", names, names.index(default_profile.name))
profile = default_profile if picked == default_profile.name else PROFILES[picked]


def money(x: float) -> str:
    return f"R$ {x:.2f}"


# ── Inputs ────────────────────────────────────────────────────────────────
c0, c1, c2 = st.columns(3)
with c0:
    total = st.number_input("Valor total, R$", min_value=0.0, step=10.0, value=0.0, format="%.2f")
metric_profit = c1.empty()
metric_rec = c2.empty()

COLS = {"odd": "Odd", "tax": "Taxa %"}


def rows_frame(rows):
    return pd.DataFrame(pad_rows(rows)).rename(columns=COLS)


if "rows" not in st.session_state:
    st.session_state["rows"] = rows_frame([])

edited = st.data_editor(
    st.session_state["rows"],
    num_rows="dynamic",
    hide_index=True,
    column_config={
        "Odd":    st.column_config.NumberColumn(format="%.2f", min_value=0.0),
        "Taxa %": st.column_config.NumberColumn(format="%.2f %%", min_value=0.0, max_value=100.0),
    },
    use_container_width=True,
    key="odds_editor",
)

rows = [
    {"odd": float(r["Odd"] or 0), "tax": float(r["Taxa %"] or 0)}
    for _, r in edited.fillna(0).iterrows()
]

# ── Keep at least two rows in the table ───────────────────────────────────
if len(rows) < MIN_ROWS:
    st.session_state["rows"] = rows_frame(rows)
    st.session_state.pop("odds_editor", None)
    st.rerun()

# ── Validation ────────────────────────────────────────────────────────────
errors = validate_session(total, rows, profile)
for field, msg in errors.items():
    st.warning(f"{field}: {msg}")

# ── Recompute on every change ─────────────────────────────────────────────
outcomes = [Outcome(**r) for r in rows]
try:
    calc = recompute(total, outcomes, profile)
except InvalidOutcomeError as e:
    st.error(f"Não é possível calcular: {e}")
    st.stop()

metric_profit.metric("Lucro", money(calc.profit), delta=round(calc.profit, 2) or None)
if calc.recommended_profit is not None:
    metric_rec.metric(
        "Lucro com valores arredondados",
        money(calc.recommended_profit),
        delta=round(calc.recommended_profit, 2) or None,
    )

result = pd.DataFrame({
    "Odd":             [o.odd for o in outcomes],
    "Taxa %":          [o.tax for o in outcomes],
    "Valor da aposta": [money(a.value) for a in calc.allocations],
})
if profile.rounding_enabled:
    result["Valor arredondado"] = [money(a.recommended) for a in calc.allocations]
st.dataframe(result, hide_index=True, use_container_width=True)

if not errors and total:
    st.caption(f"Margem da linha: {calc.market_margin * 100:.2f} %")
