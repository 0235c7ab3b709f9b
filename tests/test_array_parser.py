import pytest

from atlas2obj.errors import MalformedArrayError
from atlas2obj.processors.converters import ArrayLiteralParser


def test_parse_with_fixed_offsets():
    line = '"vertices": [[1, 2], [3, 4]],'
    assert ArrayLiteralParser.parse(line, 13, 2) == [(1, 2), (3, 4)]


def test_parse_rejects_non_integer_token():
    with pytest.raises(MalformedArrayError):
        ArrayLiteralParser.parse('"vertices": [[1, x], [3, 4]],', 13, 2)


def test_parse_rejects_float_token():
    with pytest.raises(MalformedArrayError):
        ArrayLiteralParser.parse('"vertices": [[1.5, 2], [3, 4]],', 13, 2)


def test_parse_field_packer_layout():
    line = '\t"verticesUV": [[12,3], [40,3], [40,77]],'
    assert ArrayLiteralParser.parse_field(line, "verticesUV") == [(12, 3), (40, 3), (40, 77)]


def test_parse_field_last_field_without_comma():
    line = '\t"triangles": [[0,1,2], [0,2,3]]'
    assert ArrayLiteralParser.parse_field(line, "triangles") == [(0, 1, 2), (0, 2, 3)]


def test_parse_field_single_tuple_and_negative_values():
    assert ArrayLiteralParser.parse_field('\t"vertices": [[-3,7]],', "vertices") == [(-3, 7)]


def test_parse_field_empty_array():
    assert ArrayLiteralParser.parse_field('\t"vertices": [],', "vertices") == []


def test_parse_field_wrong_literal():
    with pytest.raises(MalformedArrayError):
        ArrayLiteralParser.parse_field('\t"vertices": [[1,2]],', "triangles")


def test_vertices_literal_does_not_match_vertices_uv():
    line = '\t"verticesUV": [[1,2]],'
    assert ArrayLiteralParser.matches(line, "verticesUV")
    assert not ArrayLiteralParser.matches(line, "vertices")


@pytest.mark.parametrize("token", ["+3", "1_000", "٣", "0x1"])
def test_parse_accepts_only_plain_ascii_integers(token):
    with pytest.raises(MalformedArrayError):
        ArrayLiteralParser.parse_field(f'\t"vertices": [[{token},2], [3,4]],', "vertices")
