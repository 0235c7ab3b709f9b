import os

# 테스트 중 Matplotlib 창이 뜨지 않도록
os.environ.setdefault("MPLBACKEND", "Agg")

from typing import Dict, List, Optional

import pytest


def shape_block(label: str, vertices: str, uv: str, triangles: str,
                source=(100, 100), pivot=(0.5, 0.5), last: bool = False) -> List[str]:
    w, h = source
    return [
        f'"{label}":',
        '{',
        f'\t"frame": {{"x":0,"y":0,"w":{w},"h":{h}}},',
        '\t"rotated": false,',
        '\t"trimmed": true,',
        f'\t"spriteSourceSize": {{"x":0,"y":0,"w":{w},"h":{h}}},',
        f'\t"sourceSize": {{"w":{w},"h":{h}}},',
        f'\t"pivot": {{"x":{pivot[0]},"y":{pivot[1]}}},',
        f'\t"vertices": {vertices},',
        f'\t"verticesUV": {uv},',
        f'\t"triangles": {triangles}',
        '}},' if last else '},',
    ]


def make_export(shapes: List[List[str]], size: Optional[Dict[str, int]] = None,
                with_meta: bool = True) -> List[str]:
    lines = ['{"frames": {', '']
    for block in shapes:
        lines.extend(block)
    if with_meta:
        lines.append('"meta": {')
        lines.append('\t"app": "https://www.codeandweb.com/texturepacker",')
        lines.append('\t"version": "1.0",')
        lines.append('\t"image": "demo_atlas.png",')
        lines.append('\t"format": "RGBA8888",')
        if size is not None:
            lines.append(f'\t"size": {{"w":{size["w"]},"h":{size["h"]}}},')
        lines.append('\t"scale": "1",')
        lines.append('\t"smartupdate": "$TexturePacker:SmartUpdate:0123abcd$"')
        lines.append('}')
    lines.append('}')
    return lines


TRIANGLE = dict(vertices="[[0,0], [100,0], [0,100]]",
                uv="[[0,0], [100,100], [0,0]]",
                triangles="[[0,1,2]]")

QUAD = dict(vertices="[[0,0], [50,0], [50,50], [0,50]]",
            uv="[[50,50], [100,50], [100,100], [50,100]]",
            triangles="[[0,1,2], [0,2,3]]")


@pytest.fixture
def export_lines() -> List[str]:
    return make_export([
        shape_block("tri.png", **TRIANGLE),
        shape_block("quad.png", source=(50, 50), pivot=(0.0, 1.0), last=True, **QUAD),
    ], size={"w": 100, "h": 100})
