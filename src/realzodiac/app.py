"""RealZodiac: Streamlit app contrasting astrological and astronomical zodiac positions."""

import datetime
import html

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from realzodiac.compute import SkyEngine, run  # noqa: E402
from realzodiac.config import EngineSettings, configure_logging  # noqa: E402
from realzodiac.errors import RealZodiacError  # noqa: E402
from realzodiac.i18n import t  # noqa: E402
from realzodiac.models import QueryInput  # noqa: E402
from realzodiac.renderers.plotly_2d import render_plotly_chart  # noqa: E402
from realzodiac.zodiac import CONSTELLATION_DATE_RANGES, TROPICAL_DATE_RANGES  # noqa: E402

_CHART_WIDTH = 1000
_CHART_HEIGHT = 600


@st.cache_resource
def _engine() -> SkyEngine:
    # One engine per server process; the skyfield kernel loads once
    settings = EngineSettings.from_env()
    configure_logging(settings)
    return SkyEngine.from_settings(settings)


_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☉",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "frame" not in st.session_state:
    st.session_state.frame = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
        color: #e8e8e8;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    .verdict-box {
        background: rgba(0, 0, 0, 0.65);
        border-radius: 12px;
        padding: 1.2rem 1.6rem;
        margin-bottom: 0.5rem;
    }
    .verdict-box h4 { color: #fbbf24; margin-bottom: 0.4rem; }
    .verdict-box small { color: #999999; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.title(t("page_title", _lang))
st.caption(t("hero", _lang))

# --- Input row ---
col1, col2, col3, col4, col5, col6 = st.columns([2, 2, 1.5, 1.5, 1.5, 1.5])
with col1:
    date_val = st.date_input(
        t("label_date", _lang),
        value=datetime.date.today(),
        min_value=datetime.date(1500, 1, 1),
        max_value=datetime.date(2500, 12, 31),
    )
with col2:
    time_val = st.time_input(t("label_time", _lang), value=datetime.time(12, 0), step=900)
with col3:
    use_location = st.checkbox(t("label_use_location", _lang), value=False)
with col4:
    lat_val = st.number_input(t("label_lat", _lang), min_value=-90.0, max_value=90.0, value=37.5665)
with col5:
    lng_val = st.number_input(t("label_lng", _lang), min_value=-180.0, max_value=180.0, value=126.978)
with col6:
    st.session_state.lang = st.selectbox("Language", ["en", "ko"], index=0 if _lang == "en" else 1)
    submitted = st.button(t("btn_view_sky", _lang), use_container_width=True)

# --- Form submission handler ---
if submitted:
    when_str = f"{date_val.strftime('%Y-%m-%d')} {time_val.strftime('%H:%M')}"
    st.session_state.error_msg = None
    query = QueryInput(
        when=when_str,
        lat=lat_val if use_location else None,
        lng=lng_val if use_location else None,
    )
    try:
        st.session_state.frame = run(query, engine=_engine(), width=_CHART_WIDTH, height=_CHART_HEIGHT)
    except RealZodiacError as e:
        st.session_state.frame = None
        st.session_state.error_msg = t("error_input", _lang).format(error=html.escape(str(e)))

# --- Error message ---
if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

frame = st.session_state.frame
if frame is None:
    st.markdown(
        f"<div style='height:50vh; display:flex; align-items:center; justify-content:center;"
        f" color:#334466; font-size:1.2rem;'>{t('placeholder', _lang)}</div>",
        unsafe_allow_html=True,
    )
    st.stop()

# --- Chart ---
st.plotly_chart(
    render_plotly_chart(frame, lang=_lang),
    use_container_width=False,
    config={"scrollZoom": True, "displayModeBar": False},
)

# --- Astrology vs astronomy ---
left, right = st.columns(2)
with left:
    st.markdown(
        f"<div class='verdict-box'><h4>{t('astrology_title', _lang)}</h4>"
        f"<p><strong>{t(frame.tropical_sign, _lang)}</strong> · {TROPICAL_DATE_RANGES[frame.tropical_sign]}</p>"
        f"<small>{t('astrology_desc', _lang)}</small></div>",
        unsafe_allow_html=True,
    )
with right:
    st.markdown(
        f"<div class='verdict-box'><h4>{t('astronomy_title', _lang)}</h4>"
        f"<p><strong>{t(frame.constellation, _lang)}</strong> · {CONSTELLATION_DATE_RANGES[frame.constellation]}</p>"
        f"<small>{t('astronomy_desc', _lang)}</small></div>",
        unsafe_allow_html=True,
    )

details = f"{t('moon_phase', _lang)}: {t(frame.moon_phase_name, _lang)} ({frame.moon_phase:.2f})"
if frame.horizon is not None:
    details += " · " + t("sun_altitude", _lang).format(
        alt=frame.horizon.altitude_deg, az=frame.horizon.azimuth_deg
    )
st.caption(details)
