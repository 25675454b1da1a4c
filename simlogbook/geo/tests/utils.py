# simlogbook/geo/tests/utils.py

import numpy as np


def round_decimal(value: float, decimal_points: int) -> float:
    multiplier = 10.0 ** decimal_points
    return float(np.round(value * multiplier) / multiplier)
