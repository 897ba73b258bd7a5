import pygame
import pytest

from mahasiswa_ambis.maps import (
    BLOCK_SIZE,
    OPEN_TILE,
    SOLID_TILE,
    draw_map,
    load_map,
    parse_map,
    tile_regions,
)


def test_parse_rows_without_trailing_newline():
    assert parse_map("1 0 1\n0 1 0") == [[1, 0, 1], [0, 1, 0]]


def test_trailing_newline_adds_empty_row():
    assert parse_map("1 2\n3 4\n") == [[1, 2], [3, 4], []]


def test_empty_text_is_single_empty_row():
    assert parse_map("") == [[]]


def test_repeated_spaces_are_skipped():
    assert parse_map("1   2") == [[1, 2]]


def test_non_numbers_read_as_zero_and_prefixes_kept():
    assert parse_map("x 7abc -3 5\r") == [[0, 7, -3, 5]]


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.txt"
    rows = [[1, 1, 0], [0, 0, 1]]
    path.write_text("\n".join(" ".join(str(v) for v in row) for row in rows))
    assert load_map(path) == rows


def test_load_missing_map_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "missing.txt")


def test_tile_regions_fixed_sheet_areas():
    regions = tile_regions([[1, 0], [5]])
    assert regions == [
        ((160, 160, 32, 32), (0, 0)),
        ((128, 32, 32, 32), (BLOCK_SIZE, 0)),
        ((128, 32, 32, 32), (0, BLOCK_SIZE)),
    ]


def test_tile_regions_count_matches_cells():
    tiles = [[1, 0, 1], [], [0]]
    assert len(tile_regions(tiles)) == sum(len(row) for row in tiles)


def test_draw_map_copies_sheet_regions():
    sheet = pygame.Surface((192, 192))
    sheet.fill((0, 0, 0))
    sheet.fill((255, 0, 0), pygame.Rect(SOLID_TILE))
    sheet.fill((0, 255, 0), pygame.Rect(OPEN_TILE))
    surface = pygame.Surface((2 * BLOCK_SIZE, BLOCK_SIZE))
    draw_map(surface, [[1, 0]], sheet)
    assert surface.get_at((0, 0))[:3] == (255, 0, 0)
    assert surface.get_at((BLOCK_SIZE - 1, BLOCK_SIZE - 1))[:3] == (255, 0, 0)
    assert surface.get_at((BLOCK_SIZE, 0))[:3] == (0, 255, 0)