import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
import numpy as np
from typing import Dict, List, Sequence, Set, Tuple
from atlas2obj.types import Mesh
from atlas2obj.utils import Log


class MeshVisualizer:
    """
    변환된 메쉬들을 Wireframe 으로 시각화하고
    Greedy 알고리즘으로 인접한 삼각형의 색상을 구분합니다.
    """

    # 빨주노초파남보 색상 정의 (Matplotlib 색상 코드)
    RAINBOW_COLORS = ['red', 'orange', 'yellow', 'green', 'blue', 'indigo', 'violet']

    # 메쉬를 나란히 배치할 때의 간격 (유닛)
    SPACING = 0.25

    def __init__(self, meshes: Sequence[Mesh]):
        self.meshes = list(meshes)
        self.faces: Dict[str, List[Tuple[float, float, float]]] = {}  # { 'shape#0': [(x,y,z) x3] }
        self.face_keys: Dict[str, Tuple[str, frozenset]] = {}          # { 'shape#0': (mesh, {i,j,k}) }
        self.adjacency: Dict[str, Set[str]] = {}
        self.colors: Dict[str, str] = {}

    def process(self, show: bool = True):
        """삼각형 추출, 인접 계산, 색상 할당, 시각화를 순차적으로 실행"""
        Log.section("Visualization Started")

        # 1. 삼각형 추출
        self._parse_geometry()
        Log.info(f"Loaded {len(self.faces)} triangles from {len(self.meshes)} meshes.")

        if not self.faces:
            Log.warning("No geometry found to visualize.")
            return

        # 2. 인접 그래프 생성
        self._build_adjacency_graph()

        # 3. Greedy 색상 할당
        self._assign_colors_greedy()

        # 4. 3D 플로팅
        if show:
            self._plot_3d()

    def _parse_geometry(self):
        offset_x = 0.0
        for mesh in self.meshes:
            if len(mesh.vertices) == 0:
                continue

            # 메쉬끼리 겹치지 않도록 x 방향으로 이동
            xs = mesh.vertices[:, 0]
            shift = offset_x - xs.min()
            offset_x += (xs.max() - xs.min()) + self.SPACING

            tris = mesh.triangles
            for t in range(len(tris) // 3):
                idx = [int(i) for i in tris[t * 3:t * 3 + 3]]
                face_id = f"{mesh.name}#{t}"
                self.faces[face_id] = [
                    (float(mesh.vertices[i, 0] + shift), float(mesh.vertices[i, 1]), float(mesh.vertices[i, 2]))
                    for i in idx
                ]
                self.face_keys[face_id] = (mesh.name, frozenset(idx))

    def _build_adjacency_graph(self):
        """
        같은 메쉬에서 정점 인덱스를 2개 이상 공유하면 (Edge 공유) 인접으로 간주
        """
        edge_owners: Dict[Tuple[str, int, int], List[str]] = {}
        for face_id, (mesh_name, idx) in self.face_keys.items():
            self.adjacency[face_id] = set()
            ordered = sorted(idx)
            for a in range(len(ordered)):
                for b in range(a + 1, len(ordered)):
                    edge_owners.setdefault((mesh_name, ordered[a], ordered[b]), []).append(face_id)

        for owners in edge_owners.values():
            for face_a in owners:
                for face_b in owners:
                    if face_a != face_b:
                        self.adjacency[face_a].add(face_b)

    def _assign_colors_greedy(self):
        """Greedy Graph Coloring Algorithm"""
        # 차수(Degree)가 높은 순서대로 정렬하면 색상 사용을 최적화하는 데 도움됨
        sorted_faces = sorted(self.faces.keys(),
                              key=lambda k: len(self.adjacency[k]),
                              reverse=True)

        for face_id in sorted_faces:
            neighbor_colors = {self.colors[n] for n in self.adjacency[face_id] if n in self.colors}

            found_color = next((c for c in self.RAINBOW_COLORS if c not in neighbor_colors), None)

            # 7가지 색으로 부족할 경우, 회색(gray)을 기본값으로 사용
            self.colors[face_id] = found_color or 'gray'

    def _plot_3d(self):
        """Matplotlib을 이용한 3D 시각화"""
        fig = plt.figure(figsize=(10, 8))
        ax = fig.add_subplot(111, projection='3d')

        polygons = []
        face_colors = []
        for face_id, verts in self.faces.items():
            polygons.append(verts)
            face_colors.append(self.colors.get(face_id, 'gray'))

        poly_collection = Poly3DCollection(polygons, alpha=0.6, edgecolor='k')
        poly_collection.set_facecolor(face_colors)
        ax.add_collection3d(poly_collection)

        # 축 범위 자동 설정 (z 는 0 평면이므로 최소 폭 확보)
        all_verts = np.array([v for verts in self.faces.values() for v in verts])
        mins = all_verts.min(axis=0)
        maxs = all_verts.max(axis=0)
        ax.set_xlim(mins[0], maxs[0])
        ax.set_ylim(mins[1], maxs[1])
        ax.set_zlim(mins[2] - 0.5, maxs[2] + 0.5)

        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_zlabel('Z')
        ax.set_title(f'Atlas Mesh Preview ({len(self.meshes)} meshes, {len(self.faces)} triangles)')

        plt.show()
