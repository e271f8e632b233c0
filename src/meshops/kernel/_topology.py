"""Edge incidences, coherent orientation and face-connected components."""

from __future__ import annotations

import logging
from collections import defaultdict, deque

from meshops.core.errors import KernelError

logger = logging.getLogger(__name__)

Edge = tuple[int, int]


def face_edges(face: list[int]) -> list[Edge]:
    """Directed edges of a polygon, closing the loop."""
    return list(zip(face, face[1:] + face[:1]))


def edge_incidences(faces: list[list[int]]) -> dict[Edge, list[tuple[int, int]]]:
    """Map each undirected edge (lo, hi) to its (face index, direction) occurrences.

    Direction is +1 when the face walks the edge lo -> hi, -1 otherwise.
    """
    incidences: dict[Edge, list[tuple[int, int]]] = defaultdict(list)
    for f, face in enumerate(faces):
        for a, b in face_edges(face):
            if a == b:
                continue
            key = (a, b) if a < b else (b, a)
            incidences[key].append((f, 1 if a < b else -1))
    return incidences


def flip_face(face: list[int]) -> list[int]:
    """Reverse the winding, keeping the first vertex in place."""
    return [face[0]] + face[:0:-1]


def _signed_volume(points: list[tuple], faces: list[list[int]]) -> object:
    """Six times the signed volume enclosed by the faces (fan decomposition)."""
    total = 0
    for face in faces:
        x0, y0, z0 = points[face[0]]
        for k in range(1, len(face) - 1):
            x1, y1, z1 = points[face[k]]
            x2, y2, z2 = points[face[k + 1]]
            total += (
                x0 * (y1 * z2 - z1 * y2)
                - y0 * (x1 * z2 - z1 * x2)
                + z0 * (x1 * y2 - y1 * x2)
            )
    return total


def orient_faces(points: list[tuple], faces: list[list[int]]) -> list[list[int]]:
    """Make face windings coherent, then orient closed pieces outward.

    Orientation is propagated across edges shared by exactly two faces.
    Boundary and non-manifold edges do not constrain it.

    Raises:
        KernelError: when a piece of the surface is not orientable.
    """
    incidences = edge_incidences(faces)
    adjacency: list[list[tuple[int, int, int]]] = [[] for _ in faces]
    for occurrences in incidences.values():
        if len(occurrences) != 2:
            continue
        (f, df), (g, dg) = occurrences
        if f == g:
            continue
        adjacency[f].append((g, df, dg))
        adjacency[g].append((f, dg, df))

    # +1 keeps a face, -1 flips it
    sign = [0] * len(faces)
    groups: list[list[int]] = []
    for start in range(len(faces)):
        if sign[start]:
            continue
        sign[start] = 1
        group = [start]
        queue = deque([start])
        while queue:
            f = queue.popleft()
            for g, df, dg in adjacency[f]:
                wanted = -df * sign[f] * dg
                if sign[g] == 0:
                    sign[g] = wanted
                    group.append(g)
                    queue.append(g)
                elif sign[g] != wanted:
                    raise KernelError(
                        f"The mesh is not orientable (conflict between faces {f} and {g})."
                    )
        groups.append(group)

    oriented = [flip_face(face) if sign[i] < 0 else list(face) for i, face in enumerate(faces)]

    n_flipped_groups = 0
    for group in groups:
        closed = all(
            len(incidences[(a, b) if a < b else (b, a)]) == 2
            for f in group
            for a, b in face_edges(oriented[f])
            if a != b
        )
        if not closed:
            continue
        if _signed_volume(points, [oriented[f] for f in group]) < 0:
            for f in group:
                oriented[f] = flip_face(oriented[f])
            n_flipped_groups += 1

    logger.debug(
        f"Orientation: {sum(1 for s in sign if s < 0)} faces flipped for coherence, "
        f"{n_flipped_groups}/{len(groups)} pieces flipped outward"
    )
    return oriented


def _union_find_components(n: int, edges: list[tuple[int, int]]) -> list[list[int]]:
    """Union-find connected components.

    Args:
        n: Number of nodes.
        edges: List of (i, j) edges.

    Returns:
        List of components, each a list of node indices.
    """
    parent = list(range(n))
    rank = [0] * n

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(a: int, b: int) -> None:
        ra, rb = find(a), find(b)
        if ra == rb:
            return
        if rank[ra] < rank[rb]:
            ra, rb = rb, ra
        parent[rb] = ra
        if rank[ra] == rank[rb]:
            rank[ra] += 1

    for a, b in edges:
        union(a, b)

    groups: dict[int, list[int]] = defaultdict(list)
    for i in range(n):
        groups[find(i)].append(i)

    return list(groups.values())


def face_components(faces: list[list[int]]) -> list[list[int]]:
    """Group faces connected through shared edges, ordered by their first face."""
    links: list[tuple[int, int]] = []
    for occurrences in edge_incidences(faces).values():
        first = occurrences[0][0]
        for other, _ in occurrences[1:]:
            links.append((first, other))
    components = _union_find_components(len(faces), links)
    logger.info(f"Found {len(components)} connected components from {len(faces)} faces")
    return components
