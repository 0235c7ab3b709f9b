# atlas2obj/processors/converters/record_decoder.py
import json
from typing import Any, Dict
from atlas2obj.errors import StructuralDecodeError
from atlas2obj.types import FrameRecord, Pivot, Rect, SourceSize
from atlas2obj.utils import JsonHandler


class ShapeRecordDecoder:
    """
    재조립된 shape 블록(JSON 객체 하나)을 FrameRecord 로 변환합니다.
    vertices / verticesUV / triangles 는 여기서 다루지 않습니다 (ArrayLiteralParser 담당).
    """

    def decode(self, json_text: str) -> FrameRecord:
        try:
            data = JsonHandler.loads(json_text)
        except json.JSONDecodeError as e:
            raise StructuralDecodeError(f"Invalid shape JSON: {e}") from e

        if not isinstance(data, dict):
            raise StructuralDecodeError(f"Shape block is not an object: {type(data).__name__}")

        try:
            record = FrameRecord(
                name="",
                frame=self._rect(data["frame"]),
                rotated=self._flag(data, "rotated"),
                trimmed=self._flag(data, "trimmed"),
                sprite_source_size=self._rect(data["spriteSourceSize"]),
                source_size=SourceSize(w=int(data["sourceSize"]["w"]), h=int(data["sourceSize"]["h"])),
                pivot=Pivot(x=float(data["pivot"]["x"]), y=float(data["pivot"]["y"])),
            )
        except KeyError as e:
            raise StructuralDecodeError(f"Missing field in shape block: {e}") from e
        except (TypeError, ValueError) as e:
            raise StructuralDecodeError(f"Unexpected value in shape block: {e}") from e

        if record.source_size.w <= 0 or record.source_size.h <= 0:
            raise StructuralDecodeError(f"sourceSize must be positive, got {record.source_size}")
        if not (0.0 <= record.pivot.x <= 1.0 and 0.0 <= record.pivot.y <= 1.0):
            raise StructuralDecodeError(f"pivot must be within [0, 1], got {record.pivot}")
        return record

    @staticmethod
    def _flag(data: Dict[str, Any], key: str) -> bool:
        value = data.get(key, False)
        # "false" 같은 문자열이 True 로 바뀌지 않도록 JSON boolean 만 허용
        if not isinstance(value, bool):
            raise TypeError(f"'{key}' must be a boolean, got {value!r}")
        return value

    @staticmethod
    def _rect(value: Dict[str, Any]) -> Rect:
        return Rect(x=int(value["x"]), y=int(value["y"]), w=int(value["w"]), h=int(value["h"]))
