from __future__ import annotations

from dataclasses import dataclass, field

from descriptors.logging import Logger


@dataclass
class NormalizeConfig:
    on_error: str = "skip"  # skip|abort
    comment_prefix: str = "#"
    encoding: str = "utf-8"
    verbose: bool = False


@dataclass
class NormalizeContext:
    config: NormalizeConfig
    logger: Logger
    metrics: dict = field(default_factory=dict)
