from __future__ import annotations

from collections.abc import Generator

import pytest

from namedparams.parameters.scanner import get_default_scanner


@pytest.fixture(autouse=True)
def clear_scanner_cache() -> Generator[None, None, None]:
    """Give every test an empty shared scan cache."""
    get_default_scanner().clear_cache()
    yield
    get_default_scanner().clear_cache()
