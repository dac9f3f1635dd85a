# tests/test_config.py
import pytest

from sudoku_trainer.config import DEFAULT_TECHNIQUES, SolverConfig, load_config, load_yaml, merge_overrides


def test_defaults():
    cfg = load_config()
    assert cfg.techniques == DEFAULT_TECHNIQUES
    assert cfg.techniques[0] == "full_house"
    assert cfg.brute_force is True
    assert cfg.forward is True
    assert cfg.log_level == "INFO"


def test_yaml_file_and_overrides(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text(
        "techniques: [naked_single, hidden_single]\n"
        "brute_force: false\n"
        "log_level: debug\n"
        "unrelated: 3\n",
        encoding="utf-8",
    )
    raw = load_yaml(path)
    assert raw.brute_force is False
    assert raw.missing is None

    cfg = load_config(path, forward=False, log_level=None)
    assert cfg.techniques == ["naked_single", "hidden_single"]
    assert cfg.brute_force is False
    assert cfg.forward is False
    assert cfg.log_level == "DEBUG"


def test_none_overrides_are_skipped():
    cfg = merge_overrides({"forward": True}, forward=None, brute_force=False)
    assert cfg == {"forward": True, "brute_force": False}


def test_invalid_values():
    with pytest.raises(ValueError):
        SolverConfig(techniques=["naked_single", "guessing"])
    with pytest.raises(ValueError):
        SolverConfig(log_level="LOUD")


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SolverConfig()
