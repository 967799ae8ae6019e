"""
Tween module - easing curves for animations.

Usage:
    from canvasmath.tween import Ease, ease, ease_by_name, evaluate

    # Per frame: value at elapsed time t of a d-long animation from b to b + c
    value = ease.out_quad(t, b, c, d)

    # By enum, with normalized time
    progress = evaluate(Ease.IN_OUT_CUBIC, 0.25)

    # By name, as stored in animation options
    fn = ease_by_name("easeOutBounce")
    value = fn(t, b, c, d)
"""

from canvasmath.tween import ease
from canvasmath.tween.ease import (
    Ease,
    ElasticParams,
    ease_by_name,
    evaluate,
    get_ease_function,
    normalize_elastic,
)

__all__ = [
    "ease",
    "Ease",
    "ElasticParams",
    "ease_by_name",
    "evaluate",
    "get_ease_function",
    "normalize_elastic",
]
