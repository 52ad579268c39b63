from calculator import theme


def test_set_theme():
    # Example: set a theme and check for side effects or exceptions
    try:
        theme.set_theme(dark=False, page_title="Calculator test")
    except Exception as e:
        assert False, f"set_theme raised an exception: {e}"


def test_theme_css_uses_palette():
    assert "--calc-accent: #4da3ff;" in theme.theme_css(True)
    assert "--calc-accent: #0b63d6;" in theme.theme_css(False)


def test_toggle_label():
    assert theme.toggle_label(True) == "🌙 Dark Mode"
    assert theme.toggle_label(False) == "☀ Light Mode"


def test_base_css_is_found():
    assert ".calc-display" in theme.load_base_css()
