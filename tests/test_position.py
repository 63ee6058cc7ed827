## langzoo — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from langzoo.position import Location, Position, Source, NOWHERE, nowhere, format_position


def test_unknown_position_is_rendered_as_such():
    assert format_position(NOWHERE) == "unknown position"
    assert nowhere(42) == (42, NOWHERE)


def test_span_with_filename_reports_line_and_characters():
    loc = Position(Location(14, 2, 10), Location(17, 2, 10), 'prog.calc')
    assert format_position(loc) == 'file "prog.calc", line 2, characters 4-7'


def test_span_without_filename_omits_file():
    loc = Position(Location(3, 1, 0), Location(5, 1, 0))
    assert format_position(loc) == "line 1, characters 3-5"


@pytest.mark.parametrize("start,width", [(0, 0), (0, 1), (4, 3), (9, 0)])
def test_span_on_one_line_has_nonnegative_width(start, width):
    source = Source("x := 1 + 2;\n")
    text = format_position(source.span(start, start + width))
    begin, end = text.rsplit(' ', 1)[1].split('-')
    assert int(end) - int(begin) == width >= 0


def test_span_ending_before_it_begins_is_rejected():
    with pytest.raises(ValueError):
        Position(Location(5, 1, 0), Location(2, 1, 0))


def test_source_locations_track_lines():
    source = Source("a;\nbb;\nccc;\n", 'f.calc')
    loc = source.span(6, 8)
    assert loc.begin == Location(6, 2, 3)
    assert loc.filename == 'f.calc'
    assert format_position(loc) == 'file "f.calc", line 2, characters 3-5'


def test_end_of_input_is_past_last_character():
    source = Source("1 +\n2")
    loc = source.end_of_input()
    assert loc.begin == Location(5, 2, 4)
    assert format_position(loc) == "line 2, characters 1-1"


def test_position_of_node_without_offsets_falls_back_to_end():
    source = Source("abc")
    assert source.position_of(object()) == source.end_of_input()
