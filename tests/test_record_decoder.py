import pytest

from atlas2obj.errors import StructuralDecodeError
from atlas2obj.processors.converters import ShapeRecordDecoder
from atlas2obj.types import Pivot, Rect, SourceSize

BLOCK = (
    '{"frame": {"x":4,"y":8,"w":30,"h":40},'
    '"rotated": true,'
    '"trimmed": false,'
    '"spriteSourceSize": {"x":1,"y":2,"w":30,"h":40},'
    '"sourceSize": {"w":32,"h":44},'
    '"pivot": {"x":0.25,"y":0.75},}'
)


def test_decode_frame_fields():
    record = ShapeRecordDecoder().decode(BLOCK)

    assert record.name == ""
    assert record.frame == Rect(4, 8, 30, 40)
    assert record.rotated is True
    assert record.trimmed is False
    assert record.sprite_source_size == Rect(1, 2, 30, 40)
    assert record.source_size == SourceSize(32, 44)
    assert record.pivot == Pivot(0.25, 0.75)


def test_decode_invalid_json():
    with pytest.raises(StructuralDecodeError):
        ShapeRecordDecoder().decode('{"frame": {"x":4,')


def test_decode_missing_pivot():
    block = BLOCK.replace('"pivot": {"x":0.25,"y":0.75},', "")
    with pytest.raises(StructuralDecodeError, match="pivot"):
        ShapeRecordDecoder().decode(block)


def test_decode_zero_source_size():
    block = BLOCK.replace('"sourceSize": {"w":32,"h":44}', '"sourceSize": {"w":0,"h":44}')
    with pytest.raises(StructuralDecodeError):
        ShapeRecordDecoder().decode(block)


def test_decode_non_object():
    with pytest.raises(StructuralDecodeError):
        ShapeRecordDecoder().decode("[1, 2]")


@pytest.mark.parametrize("pivot", ['{"x":1.5,"y":0.5}', '{"x":0.5,"y":-0.1}'])
def test_decode_pivot_out_of_range(pivot):
    block = BLOCK.replace('{"x":0.25,"y":0.75}', pivot)
    with pytest.raises(StructuralDecodeError, match="pivot"):
        ShapeRecordDecoder().decode(block)


def test_decode_rejects_string_flag():
    block = BLOCK.replace('"rotated": true', '"rotated": "false"')
    with pytest.raises(StructuralDecodeError, match="rotated"):
        ShapeRecordDecoder().decode(block)
