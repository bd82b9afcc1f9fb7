from wireface import plot_faces
from wireface.core.graph import PlanarGraph
from wireface.core.mesh import reconstruct


def test_plot_faces_writes_png(tmp_path, grid_2x2):
    out = tmp_path / "grid_faces.png"
    plot_faces(reconstruct(grid_2x2), outname=str(out), vertex_labels=True)
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_faces_without_faces(tmp_path):
    g = PlanarGraph.from_arrays([[0, 0], [1, 0]], [[0, 1]])
    out = tmp_path / "segment.png"
    plot_faces(reconstruct(g), outname=str(out), title="segment")
    assert out.exists()
