"""Easing curves applied to wave distributions, backed by easing-functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from easing_functions import (
    BackEaseIn,
    BackEaseInOut,
    BackEaseOut,
    BounceEaseIn,
    BounceEaseInOut,
    BounceEaseOut,
    CircularEaseIn,
    CircularEaseInOut,
    CircularEaseOut,
    CubicEaseIn,
    CubicEaseInOut,
    CubicEaseOut,
    ElasticEaseIn,
    ElasticEaseInOut,
    ElasticEaseOut,
    ExponentialEaseIn,
    ExponentialEaseInOut,
    ExponentialEaseOut,
    LinearInOut,
    QuadEaseIn,
    QuadEaseInOut,
    QuadEaseOut,
    QuarticEaseIn,
    QuarticEaseInOut,
    QuarticEaseOut,
    QuinticEaseIn,
    QuinticEaseInOut,
    QuinticEaseOut,
    SineEaseIn,
    SineEaseInOut,
    SineEaseOut,
)

from beatshow.core.lightshow.loose import LooseIntEnum

EasingFn = Callable[[float], float]

_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


def _make_easing(easing_cls: type[Any]) -> EasingFn:
    obj = easing_cls(**_EASING_DEFAULTS)
    return lambda t: float(obj.ease(t))


class Easing(LooseIntEnum):
    """Named easing curve, as stored on the wire.

    ``NONE`` is a disabling sentinel: it evaluates to 0.0 for every input,
    it is not the identity. Use ``LINEAR`` for the identity curve.
    """

    NONE = -1

    LINEAR = 0
    IN_QUAD = 1
    OUT_QUAD = 2
    IN_OUT_QUAD = 3
    IN_SINE = 4
    OUT_SINE = 5
    IN_OUT_SINE = 6
    IN_CUBIC = 7
    OUT_CUBIC = 8
    IN_OUT_CUBIC = 9
    IN_QUART = 10
    OUT_QUART = 11
    IN_OUT_QUART = 12
    IN_QUINT = 13
    OUT_QUINT = 14
    IN_OUT_QUINT = 15
    IN_EXPO = 16
    OUT_EXPO = 17
    IN_OUT_EXPO = 18
    IN_CIRC = 19
    OUT_CIRC = 20
    IN_OUT_CIRC = 21
    IN_BACK = 22
    OUT_BACK = 23
    IN_OUT_BACK = 24
    IN_ELASTIC = 25
    OUT_ELASTIC = 26
    IN_OUT_ELASTIC = 27
    IN_BOUNCE = 28
    OUT_BOUNCE = 29
    IN_OUT_BOUNCE = 30

    # Game-specific variants, evaluated with the standard in-out curves
    BEAT_SABER_IN_OUT_BACK = 100
    BEAT_SABER_IN_OUT_ELASTIC = 101
    BEAT_SABER_IN_OUT_BOUNCE = 102

    def ease(self, t: float) -> float:
        """Evaluate the curve at progress ``t``.

        ``NONE`` and unknown values return 0.0.
        """
        curve = EASING_CURVES.get(self)
        if curve is None:
            return 0.0
        return curve(t)


EASING_CURVES: dict[Easing, EasingFn] = {
    Easing.LINEAR: _make_easing(LinearInOut),
    Easing.IN_QUAD: _make_easing(QuadEaseIn),
    Easing.OUT_QUAD: _make_easing(QuadEaseOut),
    Easing.IN_OUT_QUAD: _make_easing(QuadEaseInOut),
    Easing.IN_SINE: _make_easing(SineEaseIn),
    Easing.OUT_SINE: _make_easing(SineEaseOut),
    Easing.IN_OUT_SINE: _make_easing(SineEaseInOut),
    Easing.IN_CUBIC: _make_easing(CubicEaseIn),
    Easing.OUT_CUBIC: _make_easing(CubicEaseOut),
    Easing.IN_OUT_CUBIC: _make_easing(CubicEaseInOut),
    Easing.IN_QUART: _make_easing(QuarticEaseIn),
    Easing.OUT_QUART: _make_easing(QuarticEaseOut),
    Easing.IN_OUT_QUART: _make_easing(QuarticEaseInOut),
    Easing.IN_QUINT: _make_easing(QuinticEaseIn),
    Easing.OUT_QUINT: _make_easing(QuinticEaseOut),
    Easing.IN_OUT_QUINT: _make_easing(QuinticEaseInOut),
    Easing.IN_EXPO: _make_easing(ExponentialEaseIn),
    Easing.OUT_EXPO: _make_easing(ExponentialEaseOut),
    Easing.IN_OUT_EXPO: _make_easing(ExponentialEaseInOut),
    Easing.IN_CIRC: _make_easing(CircularEaseIn),
    Easing.OUT_CIRC: _make_easing(CircularEaseOut),
    Easing.IN_OUT_CIRC: _make_easing(CircularEaseInOut),
    Easing.IN_BACK: _make_easing(BackEaseIn),
    Easing.OUT_BACK: _make_easing(BackEaseOut),
    Easing.IN_OUT_BACK: _make_easing(BackEaseInOut),
    Easing.IN_ELASTIC: _make_easing(ElasticEaseIn),
    Easing.OUT_ELASTIC: _make_easing(ElasticEaseOut),
    Easing.IN_OUT_ELASTIC: _make_easing(ElasticEaseInOut),
    Easing.IN_BOUNCE: _make_easing(BounceEaseIn),
    Easing.OUT_BOUNCE: _make_easing(BounceEaseOut),
    Easing.IN_OUT_BOUNCE: _make_easing(BounceEaseInOut),
}
EASING_CURVES[Easing.BEAT_SABER_IN_OUT_BACK] = EASING_CURVES[Easing.IN_OUT_BACK]
EASING_CURVES[Easing.BEAT_SABER_IN_OUT_ELASTIC] = EASING_CURVES[Easing.IN_OUT_ELASTIC]
EASING_CURVES[Easing.BEAT_SABER_IN_OUT_BOUNCE] = EASING_CURVES[Easing.IN_OUT_BOUNCE]

# Every declared curve must be registered; NONE is the only member without one
_missing_curves = set(Easing) - set(EASING_CURVES) - {Easing.NONE}
if _missing_curves:
    raise RuntimeError(f"EASING_CURVES is incomplete. Missing curves: {_missing_curves}")
