import io
import logging
import datetime
import pathlib

import numpy as np
import pytest

from wireface.core.graph import PlanarGraph


LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture wireface logging for each test into an in-memory buffer and
    write it to a file only when the test fails.
    """
    # The 'wireface' logger does not propagate, so hook it directly
    logger = logging.getLogger("wireface")
    prev_level = logger.level
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(prev_level)
        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())


@pytest.fixture
def square_with_diagonal():
    pts = np.array([[0, 0], [2, 0], [2, 2], [0, 2]], dtype=float)
    edges = np.array([[0, 1], [1, 2], [0, 2], [0, 3], [2, 3]], dtype=int)
    return PlanarGraph.from_arrays(pts, edges)


@pytest.fixture
def triangle():
    pts = np.array([[0, 0], [1, 0], [0, 1]], dtype=float)
    edges = np.array([[0, 1], [1, 2], [2, 0]], dtype=int)
    return PlanarGraph.from_arrays(pts, edges)


@pytest.fixture
def grid_2x2():
    # 3x3 lattice, vertex r*3 + c at (c, r); four unit squares
    pts = np.array([[c, r] for r in range(3) for c in range(3)], dtype=float)
    edges = []
    for r in range(3):
        for c in range(2):
            edges.append([r * 3 + c, r * 3 + c + 1])
    for r in range(2):
        for c in range(3):
            edges.append([r * 3 + c, (r + 1) * 3 + c])
    return PlanarGraph.from_arrays(pts, np.array(edges, dtype=int))


@pytest.fixture
def l_shape():
    # Concave hexagon, reflex corner at vertex 3
    pts = np.array([[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]], dtype=float)
    edges = np.array([[0, 1], [1, 2], [2, 3], [3, 4], [4, 5], [5, 0]], dtype=int)
    return PlanarGraph.from_arrays(pts, edges)
