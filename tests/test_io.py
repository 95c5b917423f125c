import numpy as np
import pandas as pd
import pytest

from betawindow.data_io import load_processed, save_processed
from betawindow.exceptions import InvalidCoordinates, LabelMismatch
from betawindow.ingest import read_coordinates, read_matrix
from betawindow.pipeline import build_policies, run_moving_window
from betawindow.policy import FixedCount, Radius
from betawindow.transform import example_matrices


def _write_matrix(M, path):
    M.to_frame().to_csv(path)
    return path


def test_read_matrix_round_trip(tmp_path):
    D, _ = example_matrices(4)
    M = read_matrix(_write_matrix(D, tmp_path / "d.csv"))
    assert M.labels == D.labels
    assert np.allclose(M.values, D.values)


def test_read_matrix_rejects_mislabelled_file(tmp_path):
    df = pd.DataFrame(np.zeros((2, 2)), index=["a", "b"], columns=["a", "c"])
    df.to_csv(tmp_path / "bad.csv")
    with pytest.raises(LabelMismatch):
        read_matrix(tmp_path / "bad.csv")


def test_read_coordinates_drops_duplicates(tmp_path):
    pd.DataFrame({
        "site_id": ["a ", "a", "b"],
        "latitude": [1.0, 1.0, 2.0],
        "longitude": [3.0, 3.0, 4.0],
    }).to_csv(tmp_path / "coords.csv", index=False)
    coords = read_coordinates(tmp_path / "coords.csv")
    assert list(coords.index) == ["a", "b"]


def test_save_and_load_processed_csv(tmp_path):
    df = pd.DataFrame({"k4": [0.25, 0.3]}, index=pd.Index(["n1", "n2"], name="site_id"))
    path = save_processed(df, "out.csv", directory=tmp_path)
    assert path.exists()
    back = load_processed("out.csv", directory=tmp_path)
    assert back.loc["n1", "k4"] == pytest.approx(0.25)


def test_pipeline_from_matrix_files(tmp_path):
    D, G = example_matrices(10)
    table = run_moving_window(
        _write_matrix(D, tmp_path / "d.csv"),
        _write_matrix(G, tmp_path / "g.csv"),
        ks=[4], radii=[40, 15],
        output_name="beta.csv", output_dir=tmp_path,
    )
    assert list(table.columns) == ["k4", "r40", "r15"]
    assert table.loc["n1", "k4"] == pytest.approx(0.25)
    assert table.loc["n10", "r15"] == pytest.approx(0.1)
    assert (tmp_path / "beta.csv").exists()


def test_pipeline_rejects_matrix_and_coords(tmp_path):
    D, G = example_matrices(3)
    with pytest.raises(ValueError):
        run_moving_window(
            _write_matrix(D, tmp_path / "d.csv"),
            _write_matrix(G, tmp_path / "g.csv"),
            coords_path=tmp_path / "coords.csv",
            output_name=None,
        )


def test_read_matrix_keeps_leading_zero_labels(tmp_path):
    labels = ["001", "002", "003"]
    pd.DataFrame([[0, 1, 2], [1, 0, 1], [2, 1, 0]], index=labels, columns=labels).to_csv(tmp_path / "d.csv")
    M = read_matrix(tmp_path / "d.csv")
    assert M.labels == ("001", "002", "003")


def test_read_coordinates_keeps_leading_zero_ids(tmp_path):
    pd.DataFrame({
        "site_id": ["001", "010"],
        "latitude": [1.0, 2.0],
        "longitude": [3.0, 4.0],
    }).to_csv(tmp_path / "coords.csv", index=False)
    coords = read_coordinates(tmp_path / "coords.csv")
    assert list(coords.index) == ["001", "010"]


def test_read_coordinates_requires_id_column(tmp_path):
    pd.DataFrame({"latitude": [1.0], "longitude": [2.0]}).to_csv(tmp_path / "coords.csv", index=False)
    with pytest.raises(InvalidCoordinates):
        read_coordinates(tmp_path / "coords.csv")


def test_pipeline_from_coordinates(tmp_path):
    labels = ["001", "002", "003"]
    pd.DataFrame([[0, 0.2, 0.9], [0.2, 0, 0.7], [0.9, 0.7, 0]],
                 index=labels, columns=labels).to_csv(tmp_path / "d.csv")
    pd.DataFrame({
        "site_id": labels,
        "latitude": [0.0, 0.0, 0.0],
        "longitude": [0.0, 0.1, 1.0],
    }).to_csv(tmp_path / "coords.csv", index=False)
    table = run_moving_window(tmp_path / "d.csv", coords_path=tmp_path / "coords.csv",
                              ks=[1], radii=[], output_name=None)
    assert list(table.index) == labels
    assert table.loc["001", "k1"] == pytest.approx(0.2)
    assert table.loc["003", "k1"] == pytest.approx(0.7)


def test_save_and_load_processed_excel(tmp_path):
    df = pd.DataFrame({"r40": [0.25, 0.5]}, index=pd.Index(["001", "002"], name="site_id"))
    path = save_processed(df, "out.xlsx", directory=tmp_path)
    assert path.exists()
    back = load_processed("out.xlsx", directory=tmp_path)
    assert list(back.index) == ["001", "002"]
    assert back.loc["002", "r40"] == pytest.approx(0.5)


def test_save_processed_rejects_unknown_suffix(tmp_path):
    df = pd.DataFrame({"k4": [0.25]}, index=["n1"])
    with pytest.raises(ValueError):
        save_processed(df, "out.txt", directory=tmp_path)
    assert not (tmp_path / "out.txt").exists()


def test_build_policies_keeps_close_radii_apart():
    policies = build_policies(radii=[1000000.0, 1000001.0])
    assert len(policies) == 2
    assert set(policies.values()) == {Radius(1000000.0), Radius(1000001.0)}


def test_build_policies_drops_repeated_windows():
    policies = build_policies(ks=[4, 4], radii=[40, 40.0])
    assert policies == {"k4": FixedCount(4), "r40": Radius(40)}
