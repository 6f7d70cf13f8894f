"""Types declared with postponed (string) annotations."""

from __future__ import annotations

from typing import Annotated

from infield_lib.annotations import Input, creator, input_field


class Deferred:
    count: Annotated[int, Input(default_value="3")]
    parent: Deferred | None

    @input_field(description="Display label")
    def get_label(self) -> str:
        return ""


class DeferredCreator:
    @creator
    def __init__(self, size: Annotated[int, Input(default_value="10")], owner: Deferred):
        self.size = size
        self.owner = owner
