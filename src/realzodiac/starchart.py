"""CLI entry point for zodiac chart generation.

Edit the when/tz variables at the top, or pass them on the command line:
    uv run python src/realzodiac/starchart.py "1995-01-15 00:00" Asia/Seoul
"""

import sys

from dotenv import load_dotenv

load_dotenv()

from realzodiac.compute import SkyEngine, run  # noqa: E402
from realzodiac.config import EngineSettings, configure_logging  # noqa: E402
from realzodiac.models import QueryInput  # noqa: E402
from realzodiac.renderers.static import save_static_chart  # noqa: E402
from realzodiac.zodiac import CONSTELLATION_NAMES  # noqa: E402

when = "1995-01-15 00:00"
tz = "UTC"


def main(argv: list[str]) -> None:
    settings = EngineSettings.from_env()
    configure_logging(settings)
    query = QueryInput(
        when=argv[0] if len(argv) > 0 else when,
        tz=argv[1] if len(argv) > 1 else tz,
    )
    frame = run(query, engine=SkyEngine.from_settings(settings))
    path = save_static_chart(frame)
    print(f"Astrology: {CONSTELLATION_NAMES[frame.tropical_sign]}  Astronomy: {CONSTELLATION_NAMES[frame.constellation]}")
    print(f"Saved: {path}")


def cli() -> None:
    main(sys.argv[1:])


if __name__ == "__main__":
    cli()
