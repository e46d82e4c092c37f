import pytest

from tictactoe.config import SessionConfig, load_config


def test_defaults_without_file(tmp_path) -> None:
    config = load_config(tmp_path / "missing.yaml")
    assert config == SessionConfig()
    assert config.board_size == 3
    assert config.board_sizes == (3, 4, 5)
    assert config.state_file is None


def test_yaml_values_and_overrides(tmp_path) -> None:
    path = tmp_path / "console.yaml"
    path.write_text("board_size: 4\nstate_file: saves/game.json\nlog_level: DEBUG\n")

    config = load_config(path)
    assert config.board_size == 4
    assert config.state_file == "saves/game.json"
    assert config.log_level == "DEBUG"

    overridden = load_config(path, board_size=5, state_file=None)
    assert overridden.board_size == 5
    assert overridden.state_file == "saves/game.json"


def test_empty_yaml_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == SessionConfig()


def test_unknown_keys_rejected(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("board_colour: red\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_board_size_must_be_allowed() -> None:
    with pytest.raises(ValueError):
        SessionConfig(board_size=7)
    config = SessionConfig(board_size=7, board_sizes=[3, 7])
    assert config.board_sizes == (3, 7)


def test_log_level_is_normalised_and_validated(tmp_path) -> None:
    assert SessionConfig(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValueError):
        SessionConfig(log_level="loud")
    with pytest.raises(ValueError):
        load_config(tmp_path / "missing.yaml", log_level="loud")
