"""Event-box families: color, rotation, translation and fx."""

from beatshow.core.lightshow.groups.base import EventBox, EventData, EventGroup, ValueAxis
from beatshow.core.lightshow.groups.color import (
    ColorEventBox,
    ColorEventData,
    ColorEventGroup,
    ColorTransitionType,
    LightColor,
)
from beatshow.core.lightshow.groups.fx import (
    FxEventBox,
    FxEventContainer,
    FxEventData,
    FxEventGroup,
)
from beatshow.core.lightshow.groups.rotation import (
    RotationDirection,
    RotationEventBox,
    RotationEventData,
    RotationEventGroup,
)
from beatshow.core.lightshow.groups.translation import (
    TranslationEventBox,
    TranslationEventData,
    TranslationEventGroup,
)

__all__ = [
    # Shared
    "EventBox",
    "EventData",
    "EventGroup",
    "ValueAxis",
    # Color
    "ColorEventBox",
    "ColorEventData",
    "ColorEventGroup",
    "ColorTransitionType",
    "LightColor",
    # Rotation
    "RotationDirection",
    "RotationEventBox",
    "RotationEventData",
    "RotationEventGroup",
    # Translation
    "TranslationEventBox",
    "TranslationEventData",
    "TranslationEventGroup",
    # Fx
    "FxEventBox",
    "FxEventContainer",
    "FxEventData",
    "FxEventGroup",
]
