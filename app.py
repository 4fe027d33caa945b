"""passgen -- Streamlit web interface."""

import json

import streamlit as st
import streamlit.components.v1 as components

from passgen.session import COPY_ACK_SECONDS, NO_CLASS_HINT, GeneratorSession

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

# The clipboard write must happen inside the button's own click handler;
# a script run on a later rerun has no user activation and is rejected.
_COPY_BUTTON = '''
<button id="copyBtn" style="padding:0.45rem 1rem;border:none;border-radius:8px;
    background:#3b82f6;color:#fff;font-weight:600;cursor:pointer">Copy</button>
<span id="copyAck" style="margin-left:0.6rem;font-family:sans-serif;
    font-size:0.85rem;color:#10b981"></span>
<script>
const text = __TEXT__;
const ack = document.getElementById("copyAck");
document.getElementById("copyBtn").addEventListener("click", () => {
    navigator.clipboard.writeText(text).then(() => {
        ack.style.color = "#10b981";
        ack.textContent = "Copied!";
        setTimeout(() => { ack.textContent = ""; }, __ACK_MS__);
    }).catch((err) => {
        ack.style.color = "#ef4444";
        ack.textContent = "Copy failed: " + err.name;
    });
});
</script>
'''


def copy_button(text: str) -> None:
    """Render a Copy button that writes *text* to the clipboard on click."""
    html = (
        _COPY_BUTTON
        .replace("__TEXT__", json.dumps(text))
        .replace("__ACK_MS__", str(int(COPY_ACK_SECONDS * 1000)))
    )
    components.html(html, height=48)


# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

# ── Custom CSS ────────────────────────────────────────────────────────────

st.markdown("""<style>
/* Always show copy-to-clipboard button on code blocks */
[data-testid="stCode"] button,
[data-testid="stCodeBlock"] button,
.stCode button,
.stCodeBlock button {
    opacity: 1 !important;
    visibility: visible !important;
    transition: none !important;
}
</style>""", unsafe_allow_html=True)

if "session" not in st.session_state:
    st.session_state.session = GeneratorSession()
session: GeneratorSession = st.session_state.session

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption("Tip: Use 12+ length with all sets for strong passwords.")

# ── Controls ──────────────────────────────────────────────────────────────

col1, col2 = st.columns(2)
with col1:
    session.length = st.slider("Length", 6, 32, session.length)
with col2:
    session.upper = st.checkbox("Include uppercase", value=session.upper)
    session.lower = st.checkbox("Include lowercase", value=session.lower)
    session.digits = st.checkbox("Include numbers", value=session.digits)
    session.symbols = st.checkbox("Include symbols", value=session.symbols)
    if session.no_class_selected:
        st.caption(f":red[{NO_CLASS_HINT}]")

# ── Strength meter ────────────────────────────────────────────────────────

report = session.strength
st.markdown(
    f"**Strength:** <span style='color:{report.color.value}'>"
    f"{report.label.value}</span>"
    f" &nbsp;·&nbsp; {session.entropy} bits of entropy",
    unsafe_allow_html=True,
)
st.progress(report.percent / 100)

# ── Generate / copy ───────────────────────────────────────────────────────

if st.button("Generate", type="primary"):
    session.generate()

if session.error:
    st.error(session.error)
elif session.password:
    st.code(session.password, language=None)
else:
    st.caption("Generate a password…")

if session.can_copy:
    copy_button(session.password)
else:
    st.button("Copy", disabled=True)
