"""Tests for body document I/O."""

import json

import numpy as np
import pytest
import yaml

from gravity_sandbox.io.state_io import (
    DocumentError, bodies_from_records, bodies_to_records, load_bodies, save_bodies,
)
from gravity_sandbox.physics.body import Body, Color


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_scales_up(tmp_path, figure_eight_records):
    """Positions and velocities are multiplied by the display scale on load."""
    path = _write_json(tmp_path / "bodies.json", figure_eight_records)
    
    bodies = load_bodies(path, scale=250.0)
    
    assert len(bodies) == 3
    assert np.allclose(bodies[0].position, np.array(figure_eight_records[0]["pos"]) * 250.0)
    assert np.allclose(bodies[2].velocity, np.array(figure_eight_records[2]["vel"]) * 250.0)
    assert bodies[1].color == Color(10, 20, 30)
    # 'acc' in the file is ignored
    assert all(np.array_equal(b.acceleration, [0.0, 0.0]) for b in bodies)


def test_save_load_round_trip(tmp_path, figure_eight_records):
    """save(load(X)) == X up to floating-point tolerance."""
    source = _write_json(tmp_path / "in.json", figure_eight_records)
    target = tmp_path / "out.json"
    
    save_bodies(target, load_bodies(source, scale=250.0), scale=250.0)
    saved = json.loads(target.read_text(encoding="utf-8"))
    
    assert len(saved) == len(figure_eight_records)
    for original, record in zip(figure_eight_records, saved):
        assert np.allclose(record["pos"], original["pos"], rtol=1e-12)
        assert np.allclose(record["vel"], original["vel"], rtol=1e-12)
        assert record["mass"] == original["mass"]
        assert record["color"] == original["color"]
        assert "acc" not in record


def test_save_with_acc_for_old_readers(tmp_path):
    bodies = [Body.create([250.0, 0.0], [0.0, 500.0], 2.0, (1, 2, 3))]
    path = tmp_path / "bodies.json"
    
    save_bodies(path, bodies, scale=250.0, include_acc=True)
    saved = json.loads(path.read_text(encoding="utf-8"))
    
    assert saved == [{
        "pos": [1.0, 0.0],
        "vel": [0.0, 2.0],
        "acc": [0.0, 0.0],
        "mass": 2.0,
        "color": {"red": 1, "green": 2, "blue": 3},
    }]


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "bodies.json"
    save_bodies(path, [Body.create([0.0, 0.0], [0.0, 0.0], 1.0)])
    
    assert path.exists()


def test_yaml_documents(tmp_path, figure_eight_records):
    """YAML files hold the same record list."""
    path = tmp_path / "bodies.yaml"
    path.write_text(yaml.safe_dump(figure_eight_records), encoding="utf-8")
    
    bodies = load_bodies(path, scale=2.0)
    save_bodies(tmp_path / "copy.yml", bodies, scale=2.0)
    reloaded = load_bodies(tmp_path / "copy.yml", scale=2.0)
    
    assert len(reloaded) == 3
    for a, b in zip(bodies, reloaded):
        assert np.allclose(a.position, b.position)
        assert np.allclose(a.velocity, b.velocity)
        assert a.color == b.color


def test_color_list_form():
    bodies = bodies_from_records(
        [{"pos": [0, 0], "vel": [0, 0], "mass": 1, "color": [4, 5, 6]}], scale=1.0
    )
    assert bodies[0].color == Color(4, 5, 6)
    assert bodies[0].mass == 1.0


def test_records_round_trip_in_memory():
    bodies = [Body.create([10.0, -20.0], [3.0, 4.0], 0.5, (9, 8, 7))]
    records = bodies_to_records(bodies, scale=10.0)
    
    assert records[0]["pos"] == [1.0, -2.0]
    restored = bodies_from_records(records, scale=10.0)
    assert np.allclose(restored[0].position, bodies[0].position)
    assert restored[0].color == bodies[0].color


@pytest.mark.parametrize("records", [
    {"pos": [0, 0]},
    [["not", "a", "mapping"]],
    [{"pos": [0], "vel": [0, 0], "mass": 1, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, "x"], "mass": 1, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, 0], "mass": 0, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, 0], "mass": -1.5, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, 0], "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, 0], "mass": 1, "color": [0, 0, 256]}],
    [{"pos": [0, 0], "vel": [0, 0], "mass": 1, "color": {"red": 1, "green": 2}}],
    [{"pos": [float("nan"), 0], "vel": [0, 0], "mass": 1, "color": [0, 0, 0]}],
    [{"pos": [0, float("inf")], "vel": [0, 0], "mass": 1, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [float("-inf"), 0], "mass": 1, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, 0], "mass": float("nan"), "color": [0, 0, 0]}],
    [{"pos": [10 ** 400, 0], "vel": [0, 0], "mass": 1, "color": [0, 0, 0]}],
    [{"pos": [0, 0], "vel": [0, 0], "mass": 10 ** 400, "color": [0, 0, 0]}],
])
def test_invalid_documents(records):
    with pytest.raises(DocumentError):
        bodies_from_records(records)


@pytest.mark.parametrize("text", [
    '[{"pos": [NaN, Infinity], "vel": [0, 0], "mass": 1, "color": [0, 0, 0]}]',
    '[{"pos": [0, 0], "vel": [0, 0], "mass": 1' + "0" * 400 + ', "color": [0, 0, 0]}]',
    '[{"pos": [1' + "0" * 400 + ', 0], "vel": [0, 0], "mass": 1, "color": [0, 0, 0]}]',
])
def test_out_of_range_numbers_in_file(tmp_path, text):
    """Literals json accepts but a float cannot hold are rejected as documents."""
    path = tmp_path / "bodies.json"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(DocumentError):
        load_bodies(path)


def test_yaml_non_finite_rejected(tmp_path):
    path = tmp_path / "bodies.yaml"
    path.write_text(
        "- {pos: [.nan, 0], vel: [0, 0], mass: 1, color: [0, 0, 0]}\n", encoding="utf-8"
    )

    with pytest.raises(DocumentError):
        load_bodies(path)


def test_unparsable_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    
    with pytest.raises(DocumentError):
        load_bodies(path)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_bodies(tmp_path / "missing.json")
