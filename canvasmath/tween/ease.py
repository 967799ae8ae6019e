"""Функции сглаживания (easing) для анимаций.

Все функции имеют сигнатуру Роберта Пеннера f(t, b, c, d):
- t — прошедшее время
- b — начальное значение
- c — изменение значения (конец - начало)
- d — длительность

и возвращают значение в момент t. При t = 0 результат равен b, при t = d
равен b + c (Back и Elastic в промежутке могут выходить за эти пределы).
Функции чистые: никакого состояния между вызовами.
Исключений на числовом входе нет: d = 0 или t за пределами [0, d]
дают inf или nan там, где формула их даёт.

Терминология:
- IN (вход): медленное начало, ускорение к концу
- OUT (выход): быстрое начало, замедление к концу
- IN_OUT: медленное начало и конец, быстрая середина

See Easing Equations by Robert Penner: http://gizma.com/easing/
"""

from __future__ import annotations

import functools
import math
import re
from enum import Enum, auto
from typing import Callable, NamedTuple

import numpy as np

from canvasmath.constants import (
    BACK_IN_OUT_FACTOR,
    BACK_OVERSHOOT,
    ELASTIC_IN_OUT_PERIOD,
    ELASTIC_PERIOD,
    HALF_PI,
    TWO_PI,
)

EaseFunction = Callable[..., float]


class Ease(Enum):
    """
    Типы функций сглаживания.

    Степенные функции (чем выше степень, тем резче переход):
    - QUAD, CUBIC, QUART, QUINT

    Тригонометрические:
    - SINE: самое мягкое, естественное сглаживание

    Экспоненциальные:
    - EXPO: очень резкий переход
    - CIRC: по дуге окружности

    Специальные эффекты:
    - BACK: отход назад перед/после движения
    - ELASTIC: пружинные колебания
    - BOUNCE: отскоки, как у мячика
    """

    LINEAR = auto()

    IN_QUAD = auto()
    OUT_QUAD = auto()
    IN_OUT_QUAD = auto()

    IN_CUBIC = auto()
    OUT_CUBIC = auto()
    IN_OUT_CUBIC = auto()

    IN_QUART = auto()
    OUT_QUART = auto()
    IN_OUT_QUART = auto()

    IN_QUINT = auto()
    OUT_QUINT = auto()
    IN_OUT_QUINT = auto()

    IN_SINE = auto()
    OUT_SINE = auto()
    IN_OUT_SINE = auto()

    IN_EXPO = auto()
    OUT_EXPO = auto()
    IN_OUT_EXPO = auto()

    IN_CIRC = auto()
    OUT_CIRC = auto()
    IN_OUT_CIRC = auto()

    IN_BACK = auto()
    OUT_BACK = auto()
    IN_OUT_BACK = auto()

    IN_ELASTIC = auto()
    OUT_ELASTIC = auto()
    IN_OUT_ELASTIC = auto()

    IN_BOUNCE = auto()
    OUT_BOUNCE = auto()
    IN_OUT_BOUNCE = auto()


# ============================================================================
# Реализации функций сглаживания
# ============================================================================


def _ieee(func: EaseFunction) -> EaseFunction:
    """Считать кривую в арифметике IEEE 754.

    Аргументы приводятся к numpy.float64, ошибки плавающей точки подавлены:
    d = 0, выход t за [0, d] и переполнение дают inf или nan, а не исключение.
    """

    @functools.wraps(func)
    def wrapper(t, b, c, d, *args, **kwargs):
        with np.errstate(all="ignore"):
            return float(func(
                np.float64(t), np.float64(b), np.float64(c), np.float64(d),
                *args, **kwargs,
            ))

    return wrapper


@_ieee
def linear(t: float, b: float, c: float, d: float) -> float:
    """Линейная: равномерное движение без ускорения."""
    return c * t / d + b


# --- Квадратичные (Quad) ---

@_ieee
def in_quad(t: float, b: float, c: float, d: float) -> float:
    """Квадратичный вход: медленный старт."""
    t = t / d
    return c * t * t + b


@_ieee
def out_quad(t: float, b: float, c: float, d: float) -> float:
    """Квадратичный выход: медленный финиш."""
    t = t / d
    return -c * t * (t - 2) + b


@_ieee
def in_out_quad(t: float, b: float, c: float, d: float) -> float:
    """Квадратичный вход-выход."""
    t = t / (d / 2)
    if t < 1:
        return c / 2 * t ** 2 + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


# --- Кубические (Cubic) ---

@_ieee
def in_cubic(t: float, b: float, c: float, d: float) -> float:
    """Кубический вход."""
    t = t / d
    return c * t * t * t + b


@_ieee
def out_cubic(t: float, b: float, c: float, d: float) -> float:
    """Кубический выход."""
    t = t / d - 1
    return c * (t * t ** 2 + 1) + b


@_ieee
def in_out_cubic(t: float, b: float, c: float, d: float) -> float:
    """Кубический вход-выход."""
    t = t / (d / 2)
    if t < 1:
        return c / 2 * t ** 3 + b
    t -= 2
    return c / 2 * (t * t ** 2 + 2) + b


# --- Четвёртая степень (Quart) ---

@_ieee
def in_quart(t: float, b: float, c: float, d: float) -> float:
    """Четвёртая степень вход."""
    t = t / d
    return c * t * t ** 3 + b


@_ieee
def out_quart(t: float, b: float, c: float, d: float) -> float:
    """Четвёртая степень выход."""
    t = t / d - 1
    return -c * (t * t ** 3 - 1) + b


@_ieee
def in_out_quart(t: float, b: float, c: float, d: float) -> float:
    """Четвёртая степень вход-выход."""
    t = t / (d / 2)
    if t < 1:
        return c / 2 * t ** 4 + b
    t -= 2
    return -c / 2 * (t * t ** 3 - 2) + b


# --- Пятая степень (Quint) ---

@_ieee
def in_quint(t: float, b: float, c: float, d: float) -> float:
    """Пятая степень вход."""
    t = t / d
    return c * t * t ** 4 + b


@_ieee
def out_quint(t: float, b: float, c: float, d: float) -> float:
    """Пятая степень выход."""
    t = t / d - 1
    return c * (t * t ** 4 + 1) + b


@_ieee
def in_out_quint(t: float, b: float, c: float, d: float) -> float:
    """Пятая степень вход-выход."""
    t = t / (d / 2)
    if t < 1:
        return c / 2 * t ** 5 + b
    t -= 2
    return c / 2 * (t * t ** 4 + 2) + b


# --- Синусоидальные (Sine) ---

@_ieee
def in_sine(t: float, b: float, c: float, d: float) -> float:
    """Синусоидальный вход: самое мягкое сглаживание."""
    return -c * np.cos(t / d * HALF_PI) + c + b


@_ieee
def out_sine(t: float, b: float, c: float, d: float) -> float:
    """Синусоидальный выход."""
    return c * np.sin(t / d * HALF_PI) + b


@_ieee
def in_out_sine(t: float, b: float, c: float, d: float) -> float:
    """Синусоидальный вход-выход."""
    return -c / 2 * (np.cos(math.pi * t / d) - 1) + b


# --- Экспоненциальные (Expo) ---
# Асимптоту 2^-10 на краях не используем: концы возвращаются точно.

@_ieee
def in_expo(t: float, b: float, c: float, d: float) -> float:
    """Экспоненциальный вход: очень медленный старт, резкое ускорение."""
    if t == 0:
        return b
    return c * np.exp2(10 * (t / d - 1)) + b


@_ieee
def out_expo(t: float, b: float, c: float, d: float) -> float:
    """Экспоненциальный выход: резкий старт, очень медленный финиш."""
    if t == d:
        return b + c
    return c * (-np.exp2(-10 * t / d) + 1) + b


@_ieee
def in_out_expo(t: float, b: float, c: float, d: float) -> float:
    """Экспоненциальный вход-выход."""
    if t == 0:
        return b
    if t == d:
        return b + c
    t = t / (d / 2)
    if t < 1:
        return c / 2 * np.exp2(10 * (t - 1)) + b
    return c / 2 * (-np.exp2(-10 * (t - 1)) + 2) + b


# --- Круговые (Circ) ---
# За пределами [0, d] корень из отрицательного числа даёт nan.

@_ieee
def in_circ(t: float, b: float, c: float, d: float) -> float:
    """Круговой вход: движение по дуге окружности."""
    t = t / d
    return -c * (np.sqrt(1 - t * t) - 1) + b


@_ieee
def out_circ(t: float, b: float, c: float, d: float) -> float:
    """Круговой выход."""
    t = t / d - 1
    return c * np.sqrt(1 - t * t) + b


@_ieee
def in_out_circ(t: float, b: float, c: float, d: float) -> float:
    """Круговой вход-выход."""
    t = t / (d / 2)
    if t < 1:
        return -c / 2 * (np.sqrt(1 - t ** 2) - 1) + b
    t -= 2
    return c / 2 * (np.sqrt(1 - t * t) + 1) + b


# --- Пружина (Elastic) ---

class ElasticParams(NamedTuple):
    """Амплитуда, изменение, период и сдвиг фазы пружины."""

    a: float
    c: float
    p: float
    s: float


def normalize_elastic(a: float, c: float, p: float, s: float) -> ElasticParams:
    """Подобрать амплитуду и сдвиг фазы пружины.

    Амплитуда меньше |c| заменяется на c, сдвиг фазы тогда p / 4.
    Иначе сдвиг фазы p / 2pi * asin(c / a); случай 0/0 считается как asin(1).
    """
    if a < abs(c):
        return ElasticParams(a=c, c=c, p=p, s=p / 4)
    if c == 0 and a == 0:
        return ElasticParams(a=a, c=c, p=p, s=p / TWO_PI * math.asin(1))
    return ElasticParams(a=a, c=c, p=p, s=p / TWO_PI * math.asin(c / a))


def _elastic_wave(params: ElasticParams, t: float, d: float) -> float:
    """a * 2^(10(t-1)) * sin(((t-1)d - s) 2pi / p) для нормализованного t."""
    shifted = t - 1
    return (
        params.a
        * np.exp2(10 * shifted)
        * np.sin((shifted * d - params.s) * TWO_PI / params.p)
    )


@_ieee
def in_elastic(t: float, b: float, c: float, d: float) -> float:
    """Пружина на входе: колебания в начале движения."""
    if t == 0:
        return b
    t = t / d
    if t == 1:
        return b + c
    params = normalize_elastic(c, c, d * ELASTIC_PERIOD, BACK_OVERSHOOT)
    return -_elastic_wave(params, t, d) + b


@_ieee
def out_elastic(t: float, b: float, c: float, d: float) -> float:
    """Пружина на выходе: колебания вокруг конечной точки."""
    if t == 0:
        return b
    t = t / d
    if t == 1:
        return b + c
    params = normalize_elastic(c, c, d * ELASTIC_PERIOD, BACK_OVERSHOOT)
    return (
        params.a * np.exp2(-10 * t) * np.sin((t * d - params.s) * TWO_PI / params.p)
        + params.c
        + b
    )


@_ieee
def in_out_elastic(t: float, b: float, c: float, d: float) -> float:
    """Пружина на входе и выходе."""
    if t == 0:
        return b
    t = t / (d / 2)
    if t == 2:
        return b + c
    params = normalize_elastic(c, c, d * ELASTIC_IN_OUT_PERIOD, BACK_OVERSHOOT)
    if t < 1:
        return -0.5 * _elastic_wave(params, t, d) + b
    shifted = t - 1
    return (
        params.a
        * np.exp2(-10 * shifted)
        * np.sin((shifted * d - params.s) * TWO_PI / params.p)
        * 0.5
        + params.c
        + b
    )


# --- Отскок назад (Back) ---

@_ieee
def in_back(t: float, b: float, c: float, d: float, s: float = BACK_OVERSHOOT) -> float:
    """Отходит назад перед движением вперёд. s — величина отхода."""
    t = t / d
    return c * t * t * ((s + 1) * t - s) + b


@_ieee
def out_back(t: float, b: float, c: float, d: float, s: float = BACK_OVERSHOOT) -> float:
    """Проскакивает цель и возвращается."""
    t = t / d - 1
    return c * (t * t * ((s + 1) * t + s) + 1) + b


@_ieee
def in_out_back(t: float, b: float, c: float, d: float, s: float = BACK_OVERSHOOT) -> float:
    """Отскок назад на входе и выходе, отход усилен в 1.525 раза."""
    s = s * BACK_IN_OUT_FACTOR
    t = t / (d / 2)
    if t < 1:
        return c / 2 * (t * t * ((s + 1) * t - s)) + b
    t -= 2
    return c / 2 * (t * t * ((s + 1) * t + s) + 2) + b


# --- Отскоки (Bounce) ---

@_ieee
def out_bounce(t: float, b: float, c: float, d: float) -> float:
    """Отскоки на выходе: как падающий мячик."""
    n1 = 7.5625
    d1 = 2.75
    t = t / d
    if t < 1 / d1:
        return c * (n1 * t * t) + b
    elif t < 2 / d1:
        t -= 1.5 / d1
        return c * (n1 * t * t + 0.75) + b
    elif t < 2.5 / d1:
        t -= 2.25 / d1
        return c * (n1 * t * t + 0.9375) + b
    else:
        t -= 2.625 / d1
        return c * (n1 * t * t + 0.984375) + b


@_ieee
def in_bounce(t: float, b: float, c: float, d: float) -> float:
    """Отскоки на входе."""
    return c - out_bounce(d - t, 0, c, d) + b


@_ieee
def in_out_bounce(t: float, b: float, c: float, d: float) -> float:
    """Отскоки на входе и выходе."""
    if t < d / 2:
        return in_bounce(t * 2, 0, c, d) * 0.5 + b
    return out_bounce(t * 2 - d, 0, c, d) * 0.5 + c * 0.5 + b


# ============================================================================
# Маппинг Ease enum -> функция
# ============================================================================

_EASE_FUNCTIONS: dict[Ease, EaseFunction] = {
    Ease.LINEAR: linear,
    Ease.IN_QUAD: in_quad,
    Ease.OUT_QUAD: out_quad,
    Ease.IN_OUT_QUAD: in_out_quad,
    Ease.IN_CUBIC: in_cubic,
    Ease.OUT_CUBIC: out_cubic,
    Ease.IN_OUT_CUBIC: in_out_cubic,
    Ease.IN_QUART: in_quart,
    Ease.OUT_QUART: out_quart,
    Ease.IN_OUT_QUART: in_out_quart,
    Ease.IN_QUINT: in_quint,
    Ease.OUT_QUINT: out_quint,
    Ease.IN_OUT_QUINT: in_out_quint,
    Ease.IN_SINE: in_sine,
    Ease.OUT_SINE: out_sine,
    Ease.IN_OUT_SINE: in_out_sine,
    Ease.IN_EXPO: in_expo,
    Ease.OUT_EXPO: out_expo,
    Ease.IN_OUT_EXPO: in_out_expo,
    Ease.IN_CIRC: in_circ,
    Ease.OUT_CIRC: out_circ,
    Ease.IN_OUT_CIRC: in_out_circ,
    Ease.IN_BACK: in_back,
    Ease.OUT_BACK: out_back,
    Ease.IN_OUT_BACK: in_out_back,
    Ease.IN_ELASTIC: in_elastic,
    Ease.OUT_ELASTIC: out_elastic,
    Ease.IN_OUT_ELASTIC: in_out_elastic,
    Ease.IN_BOUNCE: in_bounce,
    Ease.OUT_BOUNCE: out_bounce,
    Ease.IN_OUT_BOUNCE: in_out_bounce,
}


def get_ease_function(ease: Ease) -> EaseFunction:
    """Функция сглаживания для значения enum."""
    return _EASE_FUNCTIONS[ease]


def evaluate(ease: Ease, t: float, b: float = 0.0, c: float = 1.0, d: float = 1.0) -> float:
    """Вычислить значение функции сглаживания.

    По умолчанию b = 0, c = 1, d = 1, то есть t — нормализованное время 0..1.
    """
    return _EASE_FUNCTIONS[ease](t, b, c, d)


_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def ease_by_name(name: str) -> EaseFunction:
    """Найти функцию по имени.

    Принимает имя enum ("IN_OUT_QUAD"), имя функции ("in_out_quad")
    или имя в стиле canvas-библиотек ("easeInOutQuad", "linear").
    """
    key = name.strip()
    if key.startswith("ease") and key[4:5].isupper():
        key = _CAMEL_RE.sub("_", key[4:])
    key = key.upper()
    try:
        return _EASE_FUNCTIONS[Ease[key]]
    except KeyError:
        raise ValueError(f"Unknown easing: {name!r}") from None
