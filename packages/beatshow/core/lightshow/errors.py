"""Errors raised by the light distribution engine."""


class LightIndexError(IndexError):
    """A light ID outside ``[0, group_size)`` was passed to the engine.

    The index is never clamped or wrapped.
    """

    def __init__(self, light_id: int, group_size: int) -> None:
        super().__init__(f"Light ID {light_id} is outside group of size {group_size}")
        self.light_id = light_id
        self.group_size = group_size
