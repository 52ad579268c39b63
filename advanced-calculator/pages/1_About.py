import pandas as pd
import streamlit as st

from calculator.engine import UNARY_FUNCTIONS
from calculator.keymap import KEY_BINDINGS
from calculator.session import get_session
from calculator.settings import get_config
from calculator.theme import set_theme


def about_page():
    config = get_config()
    session = get_session(st.session_state, config)
    set_theme(dark=session.dark, page_title="About - Advanced Calculator")

    st.title("About This Calculator")
    st.write("""
        A keypad calculator with scientific shortcuts, keyboard entry and a light/dark theme.

        ### How input works
        - Pressing an operator right after another replaces it, so `5+*` becomes `5*`.
        - An empty display only accepts `-` as its first operator.
        - After an `Error`, typing a digit or `.` starts a new expression; `DEL` or `C` clear it.
        - `^` is exponentiation and `π` inserts the value of pi.
        - Scientific buttons evaluate the display first, then apply the function.
          Trigonometric functions use radians and `log` is base 10.
    """)

    st.subheader("Keyboard shortcuts")
    st.dataframe(
        pd.DataFrame(sorted(KEY_BINDINGS.items()), columns=["Key", "Button"]),
        hide_index=True,
        use_container_width=True,
    )

    st.subheader("Settings")
    st.write(f"""
        - Results are rounded to **{config.precision}** significant digits.
        - History keeps the last **{config.history_limit}** calculations.
        - Scientific functions: {", ".join(f"`{name}`" for name in UNARY_FUNCTIONS)}.
    """)


about_page()
