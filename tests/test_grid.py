import pytest

from termsnake.grid import HUD_ROW, HUD_WIDTH, free_cell_mask, in_hud, wrap


@pytest.mark.parametrize("coord", [-21, -8, -7, -1, 0, 3, 6, 7, 20])
@pytest.mark.parametrize("speed", [-1, 0, 1])
def test_wrap_stays_inside_axis(coord, speed):
    result = wrap(coord, speed, 7)
    assert 0 <= result < 7
    assert result == (coord + speed) % 7


def test_wrap_crosses_edges():
    assert wrap(19, 1, 20) == 0
    assert wrap(0, -1, 20) == 19
    assert wrap(-3, 0, 20) == 17


def test_wrap_rejects_empty_axis():
    with pytest.raises(ValueError):
        wrap(1, 1, 0)


def test_hud_rectangle():
    assert in_hud((0, HUD_ROW))
    assert in_hud((HUD_WIDTH - 1, HUD_ROW))
    assert not in_hud((HUD_WIDTH, HUD_ROW))
    assert not in_hud((0, 0))
    assert not in_hud((3, 2))


def test_free_cell_mask_excludes_hud_and_occupied():
    mask = free_cell_mask(12, 4, [(5, 3), (11, 0), (50, 50)])
    assert mask.shape == (4, 12)
    assert not mask[HUD_ROW, :HUD_WIDTH].any()
    assert mask[HUD_ROW, HUD_WIDTH:].all()
    assert not mask[3, 5]
    assert not mask[0, 11]
    assert mask.sum() == 12 * 4 - HUD_WIDTH - 2


def test_free_cell_mask_on_narrow_grid():
    mask = free_cell_mask(3, 2)
    assert mask[0].all()
    assert not mask[1].any()
