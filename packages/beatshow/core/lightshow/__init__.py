"""Light distribution engine: filters, distributions and event-box families."""

from beatshow.core.lightshow.distribution import DistributionType, EventAxis, TransitionType
from beatshow.core.lightshow.document import (
    LightshowDocument,
    decode_lightshow,
    parse_version,
    revision_for_version,
)
from beatshow.core.lightshow.easing import EASING_CURVES, Easing
from beatshow.core.lightshow.errors import LightIndexError
from beatshow.core.lightshow.filter import (
    Filter,
    FilterRevision,
    FilterType,
    LimitAxis,
    LimitBehaviour,
    RandomBehaviour,
)
from beatshow.core.lightshow.groups import (
    ColorEventBox,
    ColorEventData,
    ColorEventGroup,
    ColorTransitionType,
    EventBox,
    EventGroup,
    FxEventBox,
    FxEventContainer,
    FxEventData,
    FxEventGroup,
    LightColor,
    RotationDirection,
    RotationEventBox,
    RotationEventData,
    RotationEventGroup,
    TranslationEventBox,
    TranslationEventData,
    TranslationEventGroup,
)
from beatshow.core.lightshow.loose import LooseBool, LooseIntEnum

__all__ = [
    # Enums
    "DistributionType",
    "Easing",
    "EASING_CURVES",
    "EventAxis",
    "FilterRevision",
    "FilterType",
    "LimitAxis",
    "LimitBehaviour",
    "LooseBool",
    "LooseIntEnum",
    "RandomBehaviour",
    "TransitionType",
    # Errors
    "LightIndexError",
    # Filter
    "Filter",
    # Families
    "EventBox",
    "EventGroup",
    "ColorEventBox",
    "ColorEventData",
    "ColorEventGroup",
    "ColorTransitionType",
    "LightColor",
    "RotationDirection",
    "RotationEventBox",
    "RotationEventData",
    "RotationEventGroup",
    "TranslationEventBox",
    "TranslationEventData",
    "TranslationEventGroup",
    "FxEventBox",
    "FxEventContainer",
    "FxEventData",
    "FxEventGroup",
    # Document
    "LightshowDocument",
    "decode_lightshow",
    "parse_version",
    "revision_for_version",
]
