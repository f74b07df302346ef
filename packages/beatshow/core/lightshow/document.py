"""Decoding and encoding of the lightshow part of a difficulty document.

Only the event-box arrays are modelled; every other key of the document
(notes, obstacles, custom data, ...) is ignored. The document's ``version``
selects the filter revision injected into every filter while validating:
chunking only applies from format 3.1 on.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from beatshow.core.config.models import DEFAULT_FORMAT_VERSION, EngineConfig
from beatshow.core.lightshow.filter import FilterRevision
from beatshow.core.lightshow.groups.color import ColorEventBox
from beatshow.core.lightshow.groups.fx import BOXES_KEY, COLLECTION_KEY, FxEventContainer
from beatshow.core.lightshow.groups.rotation import RotationEventBox
from beatshow.core.lightshow.groups.translation import TranslationEventBox

logger = logging.getLogger(__name__)

# First format version with chunking
CURRENT_REVISION_SINCE: tuple[int, ...] = (3, 1)


def parse_version(text: str) -> tuple[int, ...]:
    """Parse a dotted format version.

    Args:
        text: Version string such as "3.3.0"

    Returns:
        Tuple of integer components

    Raises:
        ValueError: If any component is not a non-negative integer

    Example:
        >>> parse_version("3.2.0")
        (3, 2, 0)
    """
    parts = text.strip().split(".")
    if not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid format version: {text!r}")
    return tuple(int(part) for part in parts)


def revision_for_version(version: tuple[int, ...]) -> FilterRevision:
    """Return the filter revision a document of this format version uses."""
    if version < CURRENT_REVISION_SINCE:
        return FilterRevision.LEGACY
    return FilterRevision.CURRENT


class LightshowDocument(BaseModel):
    """The event-box arrays of a difficulty document.

    Build instances with ``decode_lightshow`` so filters get the revision
    matching ``version``. Validating directly evaluates every filter with
    the current revision.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    version: str = DEFAULT_FORMAT_VERSION
    color_event_boxes: list[ColorEventBox] = Field(
        default_factory=list, alias="lightColorEventBoxGroups"
    )
    rotation_event_boxes: list[RotationEventBox] = Field(
        default_factory=list, alias="lightRotationEventBoxGroups"
    )
    # 3.2+
    translation_event_boxes: list[TranslationEventBox] | None = Field(
        default=None, alias="lightTranslationEventBoxGroups"
    )
    # 3.3+, spread over two top-level keys on the wire
    fx_events: FxEventContainer | None = None

    @model_validator(mode="before")
    @classmethod
    def _gather_fx_keys(cls, data: Any) -> Any:
        """Group the two top-level fx keys into the ``fx_events`` field."""
        if not isinstance(data, Mapping) or BOXES_KEY not in data:
            return data
        gathered = {
            key: value for key, value in data.items() if key not in (BOXES_KEY, COLLECTION_KEY)
        }
        gathered["fx_events"] = {
            BOXES_KEY: data[BOXES_KEY],
            COLLECTION_KEY: data.get(COLLECTION_KEY),
        }
        return gathered

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        parse_version(value)
        return value

    @property
    def filter_revision(self) -> FilterRevision:
        """Filter revision implied by ``version``."""
        return revision_for_version(parse_version(self.version))

    def box_count(self) -> int:
        """Total number of event boxes across all families."""
        count = len(self.color_event_boxes) + len(self.rotation_event_boxes)
        if self.translation_event_boxes is not None:
            count += len(self.translation_event_boxes)
        if self.fx_events is not None:
            count += len(self.fx_events.event_boxes)
        return count

    def to_wire(self) -> dict[str, Any]:
        """Return the document in wire form (compact keys, JSON types).

        Optional families that were absent stay absent. Explicit nulls
        inside boxes are written back as nulls.
        """
        exclude = {"fx_events"}
        if self.translation_event_boxes is None:
            exclude.add("translation_event_boxes")
        wire = self.model_dump(by_alias=True, mode="json", exclude=exclude)
        if self.fx_events is not None:
            wire.update(self.fx_events.to_wire())
        return wire


def decode_lightshow(
    raw: Mapping[str, Any], config: EngineConfig | None = None
) -> LightshowDocument:
    """Validate a raw difficulty document.

    Args:
        raw: Parsed document (a JSON object)
        config: Engine configuration; supplies the format version assumed
            when the document has none

    Returns:
        Validated LightshowDocument

    Raises:
        ValueError: If the version string is malformed
        ValidationError: If the document is malformed

    Example:
        >>> doc = decode_lightshow({"version": "3.0.0", "lightColorEventBoxGroups": []})
        >>> doc.filter_revision
        <FilterRevision.LEGACY: 'legacy'>
    """
    if config is None:
        config = EngineConfig()

    version = str(raw.get("version") or config.default_format_version)
    revision = revision_for_version(parse_version(version))

    document = LightshowDocument.model_validate(
        {**raw, "version": version}, context={"filter_revision": revision}
    )
    logger.debug(
        "Decoded lightshow v%s (%s filters): %d event boxes",
        version,
        revision.value,
        document.box_count(),
    )
    return document

