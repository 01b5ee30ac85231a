"""
Tests for the algo-toolkit command line.
"""

import io
import json
import logging

import pytest

from algo_toolkit.cli import main
from algo_toolkit.config import ToolkitConfig
from algo_toolkit.utils.logging_config import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_package_logger():
    """main() calls setup_logging(); drop its handlers afterwards."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)


@pytest.fixture
def run(monkeypatch, capsys):
    """Run the CLI with *stdin_text* and return (exit_code, parsed stdout, stderr)."""

    def _run(argv, stdin_text=None):
        if stdin_text is not None:
            monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
        code = main(
            ["--log-level", "WARNING"] + argv,
            toolkit_config=ToolkitConfig(kmeans_seed=0),
        )
        captured = capsys.readouterr()
        out = json.loads(captured.out) if captured.out.strip() else None
        return code, out, captured.err

    return _run


def test_sort_merge(run):
    code, out, _ = run(["sort"], "[3, 1, 2]")
    assert code == 0
    assert out == [1, 2, 3]


def test_sort_quick_reverse(run):
    code, out, _ = run(["sort", "--algorithm", "quick", "--reverse"], '["b", "c", "a"]')
    assert code == 0
    assert out == ["c", "b", "a"]


def test_sort_from_file(run, tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[5, 4, 6]", encoding="utf-8")
    code, out, _ = run(["sort", str(path)])
    assert code == 0
    assert out == [4, 5, 6]


def test_search(run):
    code, out, _ = run(["search", "--target", "5"], "[1, 3, 5, 7]")
    assert code == 0
    assert out == {"index": 2, "found": True}

    code, out, _ = run(["search", "--target", "4"], "[1, 3, 5, 7]")
    assert out == {"index": -1, "found": False}


def test_distance(run):
    code, out, _ = run(["distance", "kitten", "sitting"])
    assert code == 0
    assert out == {"distance": 3}


def test_fuzzy_strings(run):
    code, out, _ = run(
        ["fuzzy", "--query", "apple", "--threshold", "0.8"],
        '["apple", "banana", "apply"]',
    )
    assert code == 0
    assert out == [
        {"item": "apple", "similarity": 1.0},
        {"item": "apply", "similarity": pytest.approx(0.8)},
    ]


def test_fuzzy_objects_by_key(run):
    code, out, _ = run(
        ["fuzzy", "--query", "jon", "--key", "name", "--threshold", "0.9"],
        '[{"name": "Jon"}, {"name": "Alice"}]',
    )
    assert code == 0
    assert out == [{"item": {"name": "Jon"}, "similarity": 1.0}]


def test_kmeans(run):
    code, out, _ = run(["kmeans", "--k", "2", "--seed", "0"], "[[1, 1], [8, 8]]")
    assert code == 0
    assert sorted(out["clusters"]) == [[0], [1]]
    assert out["converged"] is True
    assert len(out["centroids"]) == 2


def test_kmeans_invalid_k_exit_code(run):
    code, out, err = run(["kmeans", "--k", "3"], "[[1, 1], [8, 8]]")
    assert code == 2
    assert out is None
    assert "cannot exceed" in err


def test_regress(run):
    code, out, _ = run(
        ["regress", "--predict", "6"],
        '{"x": [1, 2, 3, 4, 5], "y": [2, 4, 6, 8, 10]}',
    )
    assert code == 0
    assert out["slope"] == pytest.approx(2.0)
    assert out["intercept"] == pytest.approx(0.0, abs=1e-12)
    assert out["predictions"] == [pytest.approx(12.0)]


def test_regress_zero_variance_exit_code(run):
    code, _, err = run(["regress"], '{"x": [1, 1], "y": [1, 2]}')
    assert code == 2
    assert "zero variance" in err


def test_regress_bad_payload(run):
    code, _, err = run(["regress"], "[1, 2, 3]")
    assert code == 1
    assert "regress input" in err


def test_invalid_json(run):
    code, _, err = run(["sort"], "not json")
    assert code == 1
    assert err.startswith("ERROR")


def test_fuzzy_missing_key_field(run):
    code, out, err = run(
        ["fuzzy", "--query", "ann", "--key", "name"],
        '[{"name": "ann"}, {"nick": "bob"}]',
    )
    assert code == 1
    assert out is None
    assert "no field 'name'" in err


def test_kmeans_non_numeric_exit_code(run):
    code, out, err = run(["kmeans", "--k", "1"], '[["a", "b"], ["c", "d"]]')
    assert code == 2
    assert out is None
    assert "not a numeric vector" in err
