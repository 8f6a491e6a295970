"""Geometry and shading data types for loaded meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

VEC3_SIZE = 3
VEC4_SIZE = 4


def to_radian(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180)


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int


WHITE = Color(255, 255, 255)
GRAY = Color(128, 128, 128)
BLUE = Color(0, 0, 255)
GREEN = Color(0, 255, 0)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
RED = Color(255, 0, 0)

RGB = tuple[float, float, float]


@dataclass
class Material:
    """Surface lighting parameters (Kd, Ks, Ka, Ns of an MTL file)."""

    diffuse: RGB = (0.0, 0.0, 0.0)
    specular: RGB = (0.0, 0.0, 0.0)
    ambient: RGB = (0.0, 0.0, 0.0)
    specular_strength: float = 1.0
    shininess: int = 0

    def copy(self) -> Material:
        """Return an independent copy of this material."""
        return replace(self)


BRONZE = Material((1.0, 0.5, 0.31), (0.5, 0.5, 0.5), (1.0, 0.5, 0.31), 1.0, 52)
JADE = Material(
    (0.54, 0.89, 0.63), (0.316228, 0.316228, 0.316228), (0.135, 0.2225, 0.1575), 1.0, 13
)
TURQUOISE = Material(
    (0.396, 0.74151, 0.69102), (0.297254, 0.30829, 0.306678), (0.1, 0.18725, 0.1745), 1.0, 26
)
BLACK_RUBBER = Material((0.01, 0.01, 0.01), (0.4, 0.4, 0.4), (0.02, 0.02, 0.02), 1.0, 20)
CHROME = Material(
    (0.4, 0.4, 0.4), (0.774597, 0.774597, 0.774597), (0.25, 0.25, 0.25), 1.0, 76
)
CYAN_PLASTIC = Material(
    (0.0, 0.50980392, 0.50980392), (0.50196078, 0.50196078, 0.50196078), (0.0, 0.1, 0.06), 1.0, 32
)


@dataclass
class Vec4:
    """A homogeneous four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(eq=False)
class Vertex:
    """A mesh vertex shared between faces."""

    pos: Vec4
    colour: Color = WHITE
    references: int = 0
    material: Material = field(default_factory=Material)

    def coord(self, index: int) -> float:
        """Return component 0..3 of the position; any other index gives 0.0."""
        components = (self.pos.x, self.pos.y, self.pos.z, self.pos.w)
        if 0 <= index < len(components):
            return components[index]
        return 0.0


@dataclass(eq=False)
class Face:
    """A polygon: its vertices and one normal per corner."""

    vertices: list[Vertex] = field(default_factory=list)
    normals: list[Vec4] = field(default_factory=list)


@dataclass(eq=False)
class SceneObject:
    """A named group of faces sharing a material."""

    faces: list[Face] = field(default_factory=list)
    color: Color = WHITE
    material_name: str = ""
    material: Material = field(default_factory=Material)


@dataclass
class Light:
    """A point light."""

    pos: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    intensity: float = 1.0
    color: Color = WHITE