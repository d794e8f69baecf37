from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from descriptors.context import NormalizeConfig, NormalizeContext
from descriptors.logging import Logger


@pytest.fixture
def make_ctx():
    def _make_ctx(on_error="skip", comment_prefix="#", verbose=False):
        config = NormalizeConfig(
            on_error=on_error,
            comment_prefix=comment_prefix,
            verbose=verbose,
        )
        return NormalizeContext(config=config, logger=Logger(verbose=verbose))

    return _make_ctx
