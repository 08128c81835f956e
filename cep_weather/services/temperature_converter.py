"""Temperature unit conversion."""

KELVIN_OFFSET = 273.15


def celsius_to_kelvin(temp_c: float) -> float:
    return temp_c + KELVIN_OFFSET
