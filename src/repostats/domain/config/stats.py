"""Statistics configuration model."""

from typing import Literal

from pydantic import BaseModel


class StatsConfig(BaseModel):
    """Configuration for statistics computation and display.

    Attributes:
        mode: Aggregate tree blobs by extension, or use the languages listing
        apply_ignore_to_languages: Match ignore rules against language names in languages mode
        sort: Display order of categories (bytes descending, name, or as aggregated)
    """

    mode: Literal["tree", "languages"] = "tree"
    apply_ignore_to_languages: bool = False
    sort: Literal["bytes", "name", "none"] = "bytes"
