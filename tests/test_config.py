import pytest

from tetris_config import CONFIG, apply_overrides


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


def test_overrides_apply_and_skip_none():
    apply_overrides({"SEED": 3, "CELL_SIZE": None, "FPS": 30})
    assert CONFIG["SEED"] == 3
    assert CONFIG["CELL_SIZE"] == 30
    assert CONFIG["FPS"] == 30


def test_unknown_key_rejected():
    with pytest.raises(KeyError):
        apply_overrides({"GHOST_PIECE": True})


def test_non_positive_sizes_rejected():
    with pytest.raises(ValueError):
        apply_overrides({"CELL_SIZE": 0})
    with pytest.raises(ValueError):
        apply_overrides({"FPS": -1})
