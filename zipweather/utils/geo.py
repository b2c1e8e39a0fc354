def c_to_f(celsius: float) -> float:
    """Convert Celsius → Fahrenheit."""
    return celsius * 9 / 5 + 32


def valid_coordinates(lat: float, lon: float) -> bool:
    """True when (lat, lon) lies inside the usual WGS84 ranges."""
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def is_zip_code(value: str) -> bool:
    """Five digits, nothing else."""
    return len(value) == 5 and value.isascii() and value.isdigit()
