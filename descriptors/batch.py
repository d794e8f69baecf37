from __future__ import annotations

from typing import Iterable, List

from descriptors.context import NormalizeContext
from descriptors.ir import ParseOutcome
from descriptors.parser import DescriptorError, detect_notation, parse
from descriptors.util.strings import clean_line


def normalize_all(lines: Iterable[str], ctx: NormalizeContext) -> List[ParseOutcome]:
    """Parse every descriptor in ``lines``.

    Blank and comment lines are skipped but still advance the line counter.
    With ``on_error: abort`` the first ``DescriptorError`` propagates.
    """
    stats = ctx.metrics.setdefault("batch", {
        "total": 0,
        "parsed": 0,
        "failed": 0,
        "jar": 0,
        "mapping": 0,
    })
    outcomes: List[ParseOutcome] = []
    for lineno, line in enumerate(lines, start=1):
        raw = clean_line(line, ctx.config.comment_prefix)
        if raw is None:
            continue
        notation = detect_notation(raw)
        stats["total"] += 1
        stats[notation.value] += 1
        try:
            descriptor = parse(raw)
        except DescriptorError as exc:
            stats["failed"] += 1
            ctx.logger.warn(f"descriptor failed line={lineno} notation={notation.value} error={exc}")
            if ctx.config.on_error == "abort":
                raise
            outcomes.append(ParseOutcome(line=lineno, raw=raw, notation=notation, error=exc))
            continue
        stats["parsed"] += 1
        ctx.logger.debug(f"line={lineno} {raw} -> {descriptor.render()}")
        outcomes.append(ParseOutcome(line=lineno, raw=raw, notation=notation, descriptor=descriptor))
    return outcomes
