"""Simple two-language (en/ko) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "진짜 별자리",
        "en": "RealZodiac",
    },
    "hero": {
        "ko": "태어난 날 태양이 실제로 어디에 있었는지 확인해 보세요",
        "en": "Discover where the Sun really was when you were born",
    },
    "label_date": {
        "ko": "날짜",
        "en": "Date",
    },
    "label_time": {
        "ko": "시각 (UTC)",
        "en": "Time (UTC)",
    },
    "label_lat": {
        "ko": "위도",
        "en": "Latitude",
    },
    "label_lng": {
        "ko": "경도",
        "en": "Longitude",
    },
    "label_use_location": {
        "ko": "관측 위치 사용",
        "en": "Use observer location",
    },
    "btn_view_sky": {
        "ko": "✦ 하늘 보기",
        "en": "✦ View Sky",
    },
    "astrology_title": {
        "ko": "점성술은 이렇게 말해요",
        "en": "Astrology Says",
    },
    "astronomy_title": {
        "ko": "천문학은 이렇게 말해요",
        "en": "Astronomy Says",
    },
    "astrology_desc": {
        "ko": "약 2,000년 전 황도대가 정해졌을 때의 위치를 기준으로 합니다.",
        "en": "Based on the zodiac as it was positioned approximately 2,000 years ago.",
    },
    "astronomy_desc": {
        "ko": "지금 하늘에서 태양이 실제로 있는 곳입니다.",
        "en": "Where the Sun actually is in the sky on this date.",
    },
    "moon_phase": {
        "ko": "달의 위상",
        "en": "Moon phase",
    },
    "sun_altitude": {
        "ko": "태양 고도 {alt:.1f}°, 방위 {az:.1f}°",
        "en": "Sun altitude {alt:.1f}°, azimuth {az:.1f}°",
    },
    "error_input": {
        "ko": "입력을 해석할 수 없어요. ({error})",
        "en": "Could not read the input. ({error})",
    },
    "placeholder": {
        "ko": "날짜와 시각을 입력하고 하늘을 불러오세요",
        "en": "Enter a date and time to see the sky",
    },
    # Constellations
    "Ari": {"ko": "양자리", "en": "Aries"},
    "Tau": {"ko": "황소자리", "en": "Taurus"},
    "Gem": {"ko": "쌍둥이자리", "en": "Gemini"},
    "Cnc": {"ko": "게자리", "en": "Cancer"},
    "Leo": {"ko": "사자자리", "en": "Leo"},
    "Vir": {"ko": "처녀자리", "en": "Virgo"},
    "Lib": {"ko": "천칭자리", "en": "Libra"},
    "Sco": {"ko": "전갈자리", "en": "Scorpio"},
    "Oph": {"ko": "뱀주인자리", "en": "Ophiuchus"},
    "Sgr": {"ko": "궁수자리", "en": "Sagittarius"},
    "Cap": {"ko": "염소자리", "en": "Capricorn"},
    "Aqr": {"ko": "물병자리", "en": "Aquarius"},
    "Psc": {"ko": "물고기자리", "en": "Pisces"},
    # Moon phases
    "new_moon": {"ko": "삭", "en": "New moon"},
    "waxing_crescent": {"ko": "초승달", "en": "Waxing crescent"},
    "first_quarter": {"ko": "상현달", "en": "First quarter"},
    "waxing_gibbous": {"ko": "차오르는 볼록달", "en": "Waxing gibbous"},
    "full_moon": {"ko": "보름달", "en": "Full moon"},
    "waning_gibbous": {"ko": "기우는 볼록달", "en": "Waning gibbous"},
    "last_quarter": {"ko": "하현달", "en": "Last quarter"},
    "waning_crescent": {"ko": "그믐달", "en": "Waning crescent"},
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
