import html

import streamlit as st

from calculator.keymap import (
    MAIN_BUTTONS,
    SCIENTIFIC_BUTTONS,
    button_kind,
    dispatch,
    dispatch_keys,
)
from calculator.session import get_session, toggle_theme
from calculator.settings import configure_logging, get_config
from calculator.theme import set_theme, toggle_label


KEYBOARD_KEY = "calc_keyboard_input"

config = get_config()
configure_logging(config)
session = get_session(st.session_state, config)


# ----- Callbacks (run before the rerun renders) -----
def on_button(label: str):
    dispatch(session, label)


def on_keyboard():
    typed = st.session_state.get(KEYBOARD_KEY, "")
    if typed:
        dispatch_keys(session, typed)
    st.session_state[KEYBOARD_KEY] = ""


def on_toggle_theme():
    toggle_theme(session)


def on_clear_history():
    session.history.clear()


set_theme(dark=session.dark)


# ----- Layout -----
st.button(toggle_label(session.dark), key="theme_toggle", on_click=on_toggle_theme)

st.markdown('<div class="calc-container">', unsafe_allow_html=True)
st.markdown(
    '<div class="calc-header"><div class="calc-title">Advanced Calculator</div>'
    '<div class="calc-sub">Scientific functions, keyboard entry and history</div></div>',
    unsafe_allow_html=True,
)

display_class = "calc-display error" if session.engine.is_error else "calc-display"
st.markdown(
    f'<div class="{display_class}" aria-label="calculator display">{html.escape(session.engine.display())}</div>',
    unsafe_allow_html=True,
)

sci_cols = st.columns(len(SCIENTIFIC_BUTTONS))
for col, label in zip(sci_cols, SCIENTIFIC_BUTTONS):
    with col:
        st.button(label, key=f"sci_{label}", on_click=on_button, args=(label,), use_container_width=True)

for r, row in enumerate(MAIN_BUTTONS):
    cols = st.columns(5)
    for col, label in zip(cols, row):
        with col:
            st.button(
                label,
                key=f"btn_{r}_{label}",
                on_click=on_button,
                args=(label,),
                type="primary" if button_kind(label) == "equal" else "secondary",
                use_container_width=True,
            )

if config.keyboard_input:
    st.text_input(
        "Keyboard",
        key=KEYBOARD_KEY,
        on_change=on_keyboard,
        placeholder="Type e.g. 12*(3+4)= and press Enter",
        help="Digits, . + - * / ^ ( ) append; % applies percent; = evaluates.",
    )

entries = session.history.entries
st.markdown(
    f'<div class="calc-meta"><div>History</div><div>{len(entries)} / {session.history.limit}</div></div>',
    unsafe_allow_html=True,
)
st.markdown(
    '<div class="calc-history">' + '<br>'.join(html.escape(e.label()) for e in entries) + '</div>',
    unsafe_allow_html=True,
)

hist_cols = st.columns([1, 1])
with hist_cols[0]:
    st.download_button(
        "Download history (CSV)",
        data=session.history.to_csv(),
        file_name="calculator_history.csv",
        mime="text/csv",
        disabled=not entries,
    )
with hist_cols[1]:
    st.button("Clear history", on_click=on_clear_history, disabled=not entries)

st.markdown('</div>', unsafe_allow_html=True)
