"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/tests/test_logging_setup.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from fqcplot import configure_logging, plot_nbseq_qual

from .conftest import quality_table


@pytest.fixture
def _restore_root_logging():
    root = logging.getLogger()
    saved = (list(root.handlers), root.level)
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in saved[0]:
        root.addHandler(h)
    root.setLevel(saved[1])
    logging.getLogger("matplotlib").setLevel(logging.NOTSET)


@pytest.mark.parametrize("verbose, level", [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG)])
def test_configure_logging_installs_single_rich_handler(_restore_root_logging, verbose, level):
    handler = configure_logging(verbose)
    root = logging.getLogger()
    assert isinstance(handler, RichHandler)
    assert [h for h in root.handlers if isinstance(h, RichHandler)] == [handler]
    assert handler.level == level


def test_render_logs_page_count(caplog):
    with caplog.at_level(logging.INFO, logger="fqcplot"):
        plot_nbseq_qual(quality_table(30))
    assert any("2 page(s)" in r.getMessage() for r in caplog.records)
