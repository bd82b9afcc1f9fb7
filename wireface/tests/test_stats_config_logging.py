import logging

import pytest

from wireface.core.config import ReconstructionConfig
from wireface.core.constants import EPS_AREA, EPS_TURN
from wireface.core.logging_utils import configure_logging, get_logger
from wireface.core.mesh import reconstruct
from wireface.core.stats import TraceStats, format_trace_stats


def test_stats_invariants(grid_2x2):
    mesh = reconstruct(grid_2x2)
    s = mesh.stats
    assert s.attempts == 2 * grid_2x2.num_edges
    assert s.attempts == s.closed + s.discarded_lower_seed + s.discarded_outer + s.discarded_degenerate
    d = s.to_dict()
    assert d['closed'] == 4
    assert d['closed_rate'] == pytest.approx(4 / 24)


def test_stats_merge():
    a = TraceStats(attempts=3, closed=1, discarded_lower_seed=1, discarded_outer=1)
    b = TraceStats(attempts=2, closed=1, discarded_degenerate=1)
    a.merge(b)
    assert (a.attempts, a.closed, a.discarded) == (5, 2, 3)


def test_format_trace_stats(square_with_diagonal):
    text = format_trace_stats(reconstruct(square_with_diagonal).stats)
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[0].split()[:2] == ['attempts', 'closed']
    assert lines[2].split()[:2] == ['10', '2']


def test_format_empty_stats():
    assert '0.00' in format_trace_stats(TraceStats())


def test_config_defaults():
    cfg = ReconstructionConfig()
    assert cfg.ordering == 'relative'
    assert cfg.outer_boundary == 'turn'
    assert cfg.validate is False
    assert cfg.workers == 1
    assert cfg.turn_tol == EPS_TURN and cfg.area_tol == EPS_AREA
    with pytest.raises(AttributeError):
        cfg.workers = 2


@pytest.mark.parametrize("kwargs", [
    {'ordering': 'polar'},
    {'outer_boundary': 'area'},
    {'workers': 0},
])
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        ReconstructionConfig(**kwargs)


def test_configure_logging_sets_family_level():
    family = logging.getLogger('wireface')
    configure_logging('WARNING')
    assert family.level == logging.WARNING
    assert family.propagate is False
    configure_logging(logging.DEBUG)
    assert family.level == logging.DEBUG


def test_get_logger_inherits_by_default():
    log = get_logger('wireface.test_child')
    assert log.level == logging.NOTSET
    assert get_logger('wireface.test_child', 'ERROR').level == logging.ERROR


def test_reconstruct_logs_summary(caplog, triangle):
    log = logging.getLogger('wireface')
    log.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger='wireface'):
            reconstruct(triangle)
    finally:
        log.removeHandler(caplog.handler)
    assert any('reconstructed 1 faces' in r.getMessage() for r in caplog.records)
