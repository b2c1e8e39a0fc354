import sys
from typing import List, Optional

from .config import LOG_LEVEL, Colours
from .errors import WeatherLookupError
from .services import WeatherLookupService
from .utils import configure_logging, is_zip_code


def colourize(celsius: float, fahrenheit: float) -> str:
    """Wrap a temperature reading in a colour that hints at how warm it is."""
    if celsius >= 25:
        colour = Colours.RED
    elif celsius <= 5:
        colour = Colours.CYAN
    else:
        colour = Colours.GREEN
    return f"{colour}{celsius:.1f}°C ({fahrenheit:.1f}°F){Colours.RESET}"


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(LOG_LEVEL)

    # ------------------------------------------------------------------
    # Gather the ZIP (argument or prompt)
    # ------------------------------------------------------------------
    zip_code = argv[0].strip() if argv else input("Enter a US ZIP code: ").strip()
    if not is_zip_code(zip_code):
        sys.exit(f"'{zip_code}' is not a five-digit ZIP code.")

    # ------------------------------------------------------------------
    # ZIP → location → station → latest observation
    # ------------------------------------------------------------------
    try:
        result = WeatherLookupService().lookup(zip_code)
    except WeatherLookupError as exc:
        sys.exit(f"Error: {exc}")

    print(f"\n{Colours.BOLD}{result.city}, {result.state} {result.zip_code}{Colours.RESET}")
    print(f"Nearest weather station: {result.station}")
    print(f"\tCurrent Temperature: {colourize(result.temperature, result.temperature_f)}")


if __name__ == "__main__":
    main()
