"""Rounding and clamping rules shared by the model and the codec.

Every stored and serialized channel value goes through round_to_places with
DECIMAL_PLACES, so the rounding mode here decides the bytes written to disk.
"""

# Decimal places kept for every channel, at construction and at encode time.
DECIMAL_PLACES = 4


def clamp(value: float, lower: float, upper: float) -> float:
    """Restrict value to [lower, upper].

    NaN is not a valid input; the result for NaN is unspecified.
    """
    return min(max(value, lower), upper)


def round_to_places(value: float, places: int = DECIMAL_PLACES) -> float:
    """Round value to `places` decimal places, ties to even.

    Scales by 10**places and uses round(), which is banker's rounding for
    floats, so 1234.5 -> 1234 and 1235.5 -> 1236. The scaled integer is divided
    back so the result is the closest float to the decimal, and -0.0 never
    comes out.
    """
    factor = 10**places
    return round(value * factor) / factor
