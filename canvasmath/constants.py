"""Numeric constants shared by the easing curves and the matrix helpers."""

import math

PI_BY_180 = math.pi / 180
HALF_PI = math.pi / 2
TWO_PI = math.pi * 2

# Coefficients [a, b, c, d, e, f] of the identity transform
IDENTITY_MATRIX = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

# Back easing
BACK_OVERSHOOT = 1.70158
BACK_IN_OUT_FACTOR = 1.525

# Elastic easing periods, as a fraction of the duration
ELASTIC_PERIOD = 0.3
ELASTIC_IN_OUT_PERIOD = 0.3 * 1.5
