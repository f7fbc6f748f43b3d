"""ColorGlobe: Streamlit app hosting the color picker, dot globe, and LAF defaults browser."""

import html
import logging

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from colorglobe.colorspace import ColorParseError  # noqa: E402
from colorglobe.compute import (  # noqa: E402
    DEFAULT_SWATCH,
    DOT_COUNT_CHOICES,
    GLOBE_SWATCHES,
    compute_frame,
    compute_frames,
    generate_dots,
)
from colorglobe.config import load_settings  # noqa: E402
from colorglobe.i18n import t  # noqa: E402
from colorglobe.models import HSVColor, RGBColor  # noqa: E402
from colorglobe.palette import (  # noqa: E402
    count_rows,
    filter_colors,
    group_by_color,
    load_color_defaults,
    resolve_theme,
    rgba_string,
    update_color,
)
from colorglobe.picker import PickerState  # noqa: E402
from colorglobe.renderers.plotly_2d import (  # noqa: E402
    render_plotly_globe,
    render_spectrum,
    render_track,
)
from colorglobe.renderers.svg_2d import render_svg_html  # noqa: E402

_settings = load_settings()
logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_GLOBE_SIZE = 280
_SPECTRUM_WIDTH = 240
_SPECTRUM_HEIGHT = 200
_TRACK_HEIGHT = 14
_HUE_STOPS = tuple(HSVColor(h, 100, 100).to_rgb() for h in range(0, 361, 10))
_PICKER_SWATCHES = (
    RGBColor(0, 255, 255),
    RGBColor(255, 255, 0),
    RGBColor(255, 0, 255),
    RGBColor(0, 0, 0),
)

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", _settings.lang)

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="◉",
    layout="wide",
)

# --- Session state initialization ---

if "picker" not in st.session_state:
    st.session_state.picker = PickerState()
if "applied_color" not in st.session_state:
    st.session_state.applied_color = None
if "hex_error" not in st.session_state:
    st.session_state.hex_error = None
if "total_dots" not in st.session_state:
    st.session_state.total_dots = _settings.total_dots
if "dots" not in st.session_state:
    st.session_state.dots = generate_dots(_settings.total_dots, _settings.seed)
if "swatch" not in st.session_state:
    st.session_state.swatch = DEFAULT_SWATCH
if "defaults" not in st.session_state:
    st.session_state.defaults = load_color_defaults(_settings.defaults_path)

_theme = resolve_theme(st.session_state.defaults)

st.markdown(
    f"""
    <style>
    iframe[src*="streamlit_js_eval"] {{ display: none !important; }}
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {{
        background-color: #{_theme.background.to_hex()} !important;
        color: #{_theme.on_background.to_hex()} !important;
    }}
    [data-testid="stHeader"], [data-testid="stToolbar"] {{
        display: none !important;
    }}
    .swatch {{
        display: inline-block;
        width: 24px;
        height: 24px;
        border: 1px solid rgba(0,0,0,0.15);
        vertical-align: middle;
    }}
    .preview {{
        width: 36px;
        height: 36px;
        border-radius: 50%;
        border: 1px solid rgba(0,0,0,0.15);
    }}
    </style>
    """,
    unsafe_allow_html=True,
)


def _swatch_html(color: RGBColor, css_class: str = "swatch") -> str:
    return (
        f'<span class="{css_class}" style="background: '
        f"rgba({color.red},{color.green},{color.blue},{color.opacity:.2f}); "
        f'display:inline-block"></span>'
    )


def _commit_picker(state: PickerState) -> None:
    st.session_state.picker = state
    st.rerun()


def _selected_point(event) -> dict | None:
    points = event["selection"]["points"] if event else []
    grid = [p for p in points if p.get("curve_number", 0) == 0]
    return grid[0] if grid else None


def _picker_tab() -> None:
    state: PickerState = st.session_state.picker
    st.subheader(t("picker_title", _lang))

    col_preview, col_spectrum = st.columns([1, 5])
    with col_preview:
        st.markdown(_swatch_html(state.color, "preview"), unsafe_allow_html=True)
        st.markdown(
            f'<div class="swatch" style="background:#{state.spectrum_hue.to_hex()}"></div>',
            unsafe_allow_html=True,
        )
    with col_spectrum:
        # Keys follow the state so a committed click leaves no stale selection
        spectrum = st.plotly_chart(
            render_spectrum(state, _SPECTRUM_WIDTH, _SPECTRUM_HEIGHT),
            use_container_width=False,
            on_select="rerun",
            selection_mode="points",
            key=f"spectrum_{state.hue}_{state.saturation}_{state.brightness}",
        )
        st.caption(t("label_hue", _lang))
        hue_track = st.plotly_chart(
            render_track(_HUE_STOPS, state.hue / 360, _SPECTRUM_WIDTH, _TRACK_HEIGHT),
            use_container_width=False,
            on_select="rerun",
            selection_mode="points",
            key=f"hue_track_{state.hue}",
        )
        st.caption(t("label_opacity", _lang))
        opacity_stops = [state.color.with_alpha(round(a / 10 * 255)) for a in range(11)]
        opacity_track = st.plotly_chart(
            render_track(opacity_stops, state.opacity / 100, _SPECTRUM_WIDTH, _TRACK_HEIGHT),
            use_container_width=False,
            on_select="rerun",
            selection_mode="points",
            key=f"opacity_track_{state.opacity}_{state.hex}",
        )

    point = _selected_point(spectrum)
    if point is not None:
        picked = state.with_spectrum_point(
            point["x"], point["y"], _SPECTRUM_WIDTH, _SPECTRUM_HEIGHT
        )
        if picked != state:
            _commit_picker(picked)
    point = _selected_point(hue_track)
    if point is not None:
        picked = state.with_hue_fraction(point["x"] / _SPECTRUM_WIDTH)
        if picked != state:
            _commit_picker(picked)
    point = _selected_point(opacity_track)
    if point is not None:
        picked = state.with_opacity_fraction(point["x"] / _SPECTRUM_WIDTH)
        if picked != state:
            _commit_picker(picked)

    if st.button(t("btn_toggle_mode", _lang)):
        _commit_picker(state.toggled_display())

    cols = st.columns([1, 1, 1, 1, 2])
    opacity_text = cols[0].text_input(
        t("label_opacity", _lang), str(state.opacity), key=f"opacity_{state.opacity}"
    )
    if opacity_text != str(state.opacity):
        _commit_picker(state.with_text("opacity", opacity_text))

    for i, (label, value) in enumerate(zip(state.channel_labels, state.channel_values)):
        text = cols[i + 1].text_input(label, str(value), key=f"ch{i}_{label}_{value}")
        if text != str(value):
            _commit_picker(state.with_channel_text(i, text))

    hex_text = cols[4].text_input(t("label_hex", _lang), state.hex, key=f"hex_{state.hex}")
    if hex_text != state.hex:
        try:
            st.session_state.hex_error = None
            _commit_picker(state.with_hex(hex_text))
        except ColorParseError as e:
            logger.info("Rejected hex input %r", hex_text)
            st.session_state.hex_error = str(e)
    if st.session_state.hex_error:
        st.warning(t("error_hex", _lang).format(error=st.session_state.hex_error))

    swatch_cols = st.columns(len(_PICKER_SWATCHES))
    for col, swatch in zip(swatch_cols, _PICKER_SWATCHES):
        with col:
            st.markdown(_swatch_html(swatch), unsafe_allow_html=True)
            if st.button(swatch.to_hex(), key=f"picker_swatch_{swatch.to_hex()}"):
                _commit_picker(PickerState.from_color(swatch))

    if st.button(t("btn_apply", _lang), type="primary"):
        st.session_state.applied_color = state.color
    if st.session_state.applied_color is not None:
        st.caption(rgba_string(st.session_state.applied_color))


def _globe_tab() -> None:
    swatch = st.radio(
        t("label_dot_color", _lang),
        list(GLOBE_SWATCHES),
        index=list(GLOBE_SWATCHES).index(st.session_state.swatch),
        horizontal=True,
    )
    st.session_state.swatch = swatch

    total = st.select_slider(
        t("label_total_dots", _lang),
        options=list(DOT_COUNT_CHOICES),
        value=min(DOT_COUNT_CHOICES, key=lambda n: abs(n - st.session_state.total_dots)),
    )
    if total != st.session_state.total_dots:
        st.session_state.total_dots = total
        st.session_state.dots = generate_dots(total, _settings.seed)

    color = GLOBE_SWATCHES[swatch]
    frames = compute_frames(
        st.session_state.dots, _settings.frames, _GLOBE_SIZE, _GLOBE_SIZE, color
    )
    fig = render_plotly_globe(frames)
    st.plotly_chart(fig, use_container_width=False, config={"displayModeBar": False})

    with st.expander("SVG"):
        frame = compute_frame(st.session_state.dots, 0.0, _GLOBE_SIZE, _GLOBE_SIZE, color)
        components.html(
            render_svg_html(
                frame,
                filename=t("svg_filename", _lang),
                save_label=t("svg_btn_save", _lang),
            ),
            height=_GLOBE_SIZE,
        )


def _defaults_tab() -> None:
    col_group, col_alpha = st.columns(2)
    grouped = col_group.checkbox(t("chk_group_by_color", _lang))
    only_alpha = col_alpha.checkbox(t("chk_only_alpha", _lang))
    query = st.text_input(t("label_filter", _lang), "")

    results = filter_colors(st.session_state.defaults, query, only_alpha)
    if not results:
        st.caption(t("empty_results", _lang))
        return
    st.caption(f"{count_rows(results, grouped)} rows")

    def _row(key: str, color: RGBColor) -> None:
        left, right = st.columns([3, 2])
        left.text(key)
        right.markdown(
            f"{_swatch_html(color)} {html.escape(rgba_string(color))}",
            unsafe_allow_html=True,
        )

    if grouped:
        for color, entries in group_by_color(results).items():
            st.markdown(f"**{html.escape(rgba_string(color))}** [{len(entries)}]")
            for entry in entries:
                _row(entry.key, entry.color)
    else:
        for key, color in results.items():
            _row(key, color)

    with st.expander(t("btn_edit_color", _lang)):
        key = st.selectbox("key", list(results))
        new_hex = st.text_input(t("label_hex", _lang), results[key].to_hex(include_alpha=True))
        if st.button(t("btn_apply", _lang), key="defaults_apply"):
            try:
                st.session_state.defaults = update_color(
                    st.session_state.defaults, key, RGBColor.from_hex(new_hex)
                )
                st.rerun()
            except ColorParseError as e:
                st.warning(t("error_hex", _lang).format(error=e))


tab_picker, tab_globe, tab_defaults = st.tabs(
    [t("tab_picker", _lang), t("tab_globe", _lang), t("tab_defaults", _lang)]
)
with tab_picker:
    _picker_tab()
with tab_globe:
    _globe_tab()
with tab_defaults:
    _defaults_tab()
