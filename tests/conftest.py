import pytest

from routegraph.core.graph import build_graph


@pytest.fixture
def triangle_graph():
    # A->B, B->C, A->C
    return build_graph([("A", "B"), ("B", "C"), ("A", "C")])


@pytest.fixture
def chain_graph():
    # A->B->C with no direct A->C route
    return build_graph([("A", "B"), ("B", "C")])


@pytest.fixture
def write_routes(tmp_path):
    def _write(text, name="routes.csv"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
