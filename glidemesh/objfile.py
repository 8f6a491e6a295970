"""Wavefront OBJ and MTL loading into scene objects."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from .model import WHITE, Color, Face, Material, SceneObject, Vec4, Vertex


def _read_lines(filename: str | Path) -> list[str]:
    with open(filename, encoding="utf-8", errors="replace") as handle:
        return handle.read().splitlines()


def _records(lines: list[str]) -> Iterator[tuple[int, str, list[str]]]:
    for number, line in enumerate(lines, start=1):
        fields = line.split()
        if fields:
            yield number, fields[0], fields[1:]


def _floats(number: int, args: list[str], count: int) -> list[float]:
    if len(args) < count:
        raise ValueError(f"line {number}: expected {count} numbers, got {len(args)}")
    try:
        return [float(value) for value in args[:count]]
    except ValueError as exc:
        raise ValueError(f"line {number}: {exc}") from None


def _index(number: int, text: str, size: int, what: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"line {number}: bad {what} index {text!r}") from None
    if not 1 <= value <= size:
        raise ValueError(f"line {number}: {what} index {value} out of range 1..{size}")
    return value - 1


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class Obj:
    """A mesh made of named objects sharing one vertex pool."""

    def __init__(self, filename: str | Path | None = None) -> None:
        self.color: Color = WHITE
        self.vertices: list[Vertex] = []
        self.materials: dict[str, Material] = {}
        self.objects: dict[str, SceneObject] = {}
        if filename is not None:
            self.load_objects(filename)

    def load_objects(self, filename: str | Path) -> None:
        """Read vertices, normals, objects and faces from an OBJ file."""
        lines = _read_lines(filename)
        self.color = WHITE
        normals: list[Vec4] = []

        for number, header, args in _records(lines):
            if header == "v":
                x, y, z = _floats(number, args, 3)
                self.create_vertex(x, y, z)
            elif header == "vn":
                x, y, z = _floats(number, args, 3)
                normals.append(Vec4(x, y, z, 0.0))

        current: SceneObject | None = None
        for number, header, args in _records(lines):
            if header == "o":
                name = args[0] if args else ""
                current = SceneObject(color=WHITE)
                self.objects.setdefault(name, current)
            elif header == "usemtl":
                if current is not None:
                    current.material_name = args[0] if args else ""
            elif header == "f":
                if current is None:
                    raise ValueError(f"line {number}: face outside of any object")
                self._read_face(number, args, normals, current)

    def _read_face(
        self, number: int, args: list[str], normals: list[Vec4], target: SceneObject
    ) -> None:
        corners = []
        for token in args:
            parts = token.split("/")
            if len(parts) < 3 or not parts[2]:
                raise ValueError(f"line {number}: face corner {token!r} has no normal")
            vertex_index = _index(number, parts[0], len(self.vertices), "vertex")
            normal_index = _index(number, parts[2], len(normals), "normal")
            corners.append((self.vertices[vertex_index], normals[normal_index]))

        face = self.create_face(*(vertex for vertex, _ in corners))
        face.normals = [Vec4() for _ in corners]
        for position, (_, normal) in enumerate(corners):
            self.set_normal(face, position, normal.x, normal.y, normal.z)
        self.add_face(target, face)

    def load_materials(self, filename: str | Path) -> None:
        """Read materials from an MTL file, pairing Kd/Ks/Ka/Ns by order."""
        names: list[str] = []
        diffuse: list[list[float]] = []
        specular: list[list[float]] = []
        ambient: list[list[float]] = []
        shininess: list[float] = []

        for number, header, args in _records(_read_lines(filename)):
            if header == "newmtl":
                names.append(args[0] if args else "")
            elif header == "Kd":
                diffuse.append(_floats(number, args, 3))
            elif header == "Ks":
                specular.append(_floats(number, args, 3))
            elif header == "Ka":
                ambient.append(_floats(number, args, 3))
            elif header == "Ns":
                shininess.append(_floats(number, args, 1)[0])

        for key, values in (("Kd", diffuse), ("Ks", specular), ("Ka", ambient), ("Ns", shininess)):
            if len(values) < len(names):
                raise ValueError(
                    f"{filename}: {len(names)} materials but only {len(values)} {key} lines"
                )

        for name, kd, ks, ka, ns in zip(names, diffuse, specular, ambient, shininess):
            material = Material(tuple(kd), tuple(ks), tuple(ka), 1.0, int(ns))
            self.materials.setdefault(name, material)

    def apply_materials(self) -> None:
        """Give each object its named material, mapping Ns 0..900 onto 1..128."""
        for scene_object in self.objects.values():
            material = self.materials.get(scene_object.material_name)
            if material is None:
                continue
            scene_object.material.diffuse = material.diffuse
            scene_object.material.specular = material.specular
            scene_object.material.ambient = material.ambient
            scene_object.material.specular_strength = material.specular_strength
            scene_object.material.shininess = _truncating_div(127 * material.shininess, 900) + 1

    def apply_material(self, scene_object: SceneObject, material: Material) -> None:
        """Copy every field of a material onto an object."""
        scene_object.material = material.copy()

    def create_vertex(self, x: float, y: float, z: float) -> Vertex:
        """Add a white vertex at (x, y, z) to the pool and return it."""
        vertex = Vertex(Vec4(float(x), float(y), float(z), 1.0), WHITE, 0)
        self.vertices.append(vertex)
        return vertex

    def create_vertex_color(self, x: float, y: float, z: float, color: Color) -> Vertex:
        """Add a vertex with the given colour to the pool and return it."""
        vertex = self.create_vertex(x, y, z)
        vertex.colour = color
        return vertex

    def set_normal(self, face: Face, index: int, x: float, y: float, z: float) -> None:
        """Set the normal of one corner of a face."""
        face.normals[index] = Vec4(x, y, z, 1.0)

    def format_vertex(self, vertex: Vertex) -> str:
        """Render a vertex position as '>[x y z w]'."""
        return ">[" + " ".join(f"{vertex.coord(i):f}" for i in range(4)) + "]"

    def create_face(self, *args: Vertex) -> Face:
        """Make a face from the given vertices without touching reference counts."""
        return Face(vertices=list(args))

    def add_vertex_to_face(self, face: Face, vertex: Vertex) -> None:
        """Append a vertex to a face and count the reference."""
        vertex.references += 1
        face.vertices.append(vertex)

    def add_face(self, scene_object: SceneObject, face: Face) -> None:
        """Attach a face to an object."""
        scene_object.faces.append(face)

    def release_face(self, face: Face) -> None:
        """Drop a face's references to its vertices, never going below zero."""
        for vertex in face.vertices:
            vertex.references = max(vertex.references - 1, 0)

    def prune_unreferenced_vertices(self) -> list[Vertex]:
        """Remove vertices with no references from the pool and return them."""
        removed = [vertex for vertex in self.vertices if vertex.references == 0]
        self.vertices = [vertex for vertex in self.vertices if vertex.references != 0]
        return removed