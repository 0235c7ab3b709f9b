# atlas2obj/processors/converters/array_parser.py
import re
from typing import List
from atlas2obj.errors import MalformedArrayError
from atlas2obj.types import IntTuple


class ArrayLiteralParser:
    """
    TexturePacker 가 한 줄로 출력하는 정수 튜플 배열을 파싱합니다.
    예) \t"vertices": [[12,3], [40,3], [40,77]],
    """

    FIELD_VERTICES = "vertices"
    FIELD_VERTICES_UV = "verticesUV"
    FIELD_TRIANGLES = "triangles"
    FIELDS = (FIELD_VERTICES, FIELD_VERTICES_UV, FIELD_TRIANGLES)

    # 튜플 사이의 구분자 "], [" → 튜플 내부 쉼표와 구별
    TUPLE_SEPARATOR = re.compile(r"\]\s*,\s*\[")
    DELIMITER = ";"
    INTEGER_TOKEN = re.compile(r"\s*-?\d+\s*", re.ASCII)

    @staticmethod
    def field_literal(field: str) -> str:
        return f'"{field}": '

    @classmethod
    def matches(cls, line: str, field: str) -> bool:
        return line.lstrip().startswith(cls.field_literal(field))

    @classmethod
    def parse(cls, line: str, prefix_len: int, suffix_len: int) -> List[IntTuple]:
        body = line[prefix_len:len(line) - suffix_len] if suffix_len else line[prefix_len:]
        if not body.strip():
            return []

        body = cls.TUPLE_SEPARATOR.sub("]" + cls.DELIMITER + "[", body)

        tuples = []
        for segment in body.split(cls.DELIMITER):
            segment = segment.replace("[", "").replace("]", "")
            tokens = segment.split(",")
            for token in tokens:
                # int() 는 '+3', '1_000', 비 ASCII 숫자도 받아들이므로 먼저 형식 검사
                if not cls.INTEGER_TOKEN.fullmatch(token):
                    raise MalformedArrayError(f"Non-integer token {token.strip()!r} in {segment.strip()!r}")
            tuples.append(tuple(int(token) for token in tokens))
        return tuples

    @classmethod
    def parse_field(cls, line: str, field: str) -> List[IntTuple]:
        """필드 이름 리터럴로부터 prefix/suffix 길이를 계산하여 parse 에 위임"""
        stripped = line.rstrip()
        literal = cls.field_literal(field)
        indent = len(stripped) - len(stripped.lstrip())

        if not stripped.startswith(literal, indent):
            raise MalformedArrayError(f"Line is not a '{field}' field: {line.strip()[:40]!r}")

        # 바깥 '[' 까지 prefix, 바깥 ']' (+ 후행 ',') 까지 suffix
        prefix_len = indent + len(literal) + 1
        suffix_len = 2 if stripped.endswith(",") else 1
        if stripped[prefix_len - 1:prefix_len] != "[" or stripped[len(stripped) - suffix_len] != "]":
            raise MalformedArrayError(f"'{field}' is not a bracketed array: {line.strip()[:40]!r}")

        return cls.parse(stripped, prefix_len, suffix_len)
