import pytest

from footy.colors import WHITE, ColorTable, parse_rgb
from footy.errors import ColorParseError, ColorTableError


def test_parse_well_formed_triple():
    assert parse_rgb("(0, 35, 89)") == (0, 35, 89)


def test_parse_without_spaces():
    assert parse_rgb("(200,16,46)") == (200, 16, 46)


def test_sentinel_resolves_to_white():
    assert parse_rgb("none") == (255, 255, 255)
    assert parse_rgb("") == WHITE


@pytest.mark.parametrize("value", ["(0, x, 89)", "(0, 35)", "(0, 35, 256)", "(-1, 0, 0)", "(1.5, 2, 3)"])
def test_malformed_triple_is_fatal(value):
    with pytest.raises(ColorParseError):
        parse_rgb(value)


def test_load_reads_quoted_triples(tmp_path):
    path = tmp_path / "colors.csv"
    path.write_text('40,"(200, 16, 46)"\n496,none\n\n')

    table = ColorTable.load(path)

    assert table.rgb_for(40) == (200, 16, 46)
    assert table.rgb_for(496) == WHITE


def test_unknown_team_is_white(colors):
    assert colors.rgb_for(99999) == WHITE


def test_missing_file_gives_empty_table(tmp_path):
    table = ColorTable.load(tmp_path / "nope.csv")

    assert table.entries == {}
    assert table.rgb_for(40) == WHITE


def test_bad_team_id_in_file(tmp_path):
    path = tmp_path / "colors.csv"
    path.write_text('Liverpool,"(200, 16, 46)"\n')

    with pytest.raises(ColorParseError):
        ColorTable.load(path)


def test_style_for_uses_truecolor(colors):
    style = colors.style_for(40)

    assert style.color.triplet == (200, 16, 46)


def test_undecodable_file_is_a_table_error(tmp_path):
    path = tmp_path / "colors.csv"
    path.write_bytes(b'157,"(220, 5, 45)"\n\xff\xfe\n')

    with pytest.raises(ColorTableError):
        ColorTable.load(path)
