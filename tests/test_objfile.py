import pytest

from glidemesh.model import BRONZE, RED, WHITE, SceneObject, Vec4
from glidemesh.objfile import Obj

CUBE_OBJ = """\
# sample
o Tri
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
vn 0.0 0.0 1.0
vn 0.0 1.0 0.0
vt 0.5 0.5
usemtl Shiny
f 1//1 2//1 3//2
o Quad
v 1.0 1.0 0.0
f 1/1/1 2/1/1 4/1/2 3/1/2
"""

MATERIALS = """\
newmtl Shiny
Ns 900.000000
Ka 1.000000 1.000000 1.000000
Kd 0.800000 0.100000 0.100000
Ks 0.500000 0.500000 0.500000
newmtl Dull
Ns 0.000000
Ka 0.000000 0.000000 0.000000
Kd 0.200000 0.200000 0.200000
Ks 0.000000 0.000000 0.000000
"""


@pytest.fixture
def obj_path(tmp_path):
    path = tmp_path / "mesh.obj"
    path.write_text(CUBE_OBJ)
    return path


@pytest.fixture
def mtl_path(tmp_path):
    path = tmp_path / "mesh.mtl"
    path.write_text(MATERIALS)
    return path


def test_load_collects_all_vertices_before_faces(obj_path):
    mesh = Obj(obj_path)
    assert len(mesh.vertices) == 4
    assert [v.coord(0) for v in mesh.vertices] == [0.0, 1.0, 0.0, 1.0]
    assert all(v.pos.w == 1.0 for v in mesh.vertices)


def test_load_objects_and_faces(obj_path):
    mesh = Obj(obj_path)
    assert sorted(mesh.objects) == ["Quad", "Tri"]
    tri = mesh.objects["Tri"]
    assert tri.material_name == "Shiny"
    assert len(tri.faces) == 1
    face = tri.faces[0]
    assert face.vertices == mesh.vertices[:3]
    assert face.normals[2] == Vec4(0.0, 1.0, 0.0, 1.0)
    quad = mesh.objects["Quad"].faces[0]
    assert quad.vertices[2] is mesh.vertices[3]
    assert len(quad.normals) == 4


def test_face_vertices_are_not_counted(obj_path):
    mesh = Obj(obj_path)
    assert all(v.references == 0 for v in mesh.vertices)


def test_face_outside_object_is_rejected(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nvn 0 0 1\nf 1//1\n")
    with pytest.raises(ValueError):
        Obj(path)


def test_face_without_normal_is_rejected(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("o A\nv 0 0 0\nf 1\n")
    with pytest.raises(ValueError):
        Obj(path)


def test_face_index_out_of_range(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("o A\nv 0 0 0\nvn 0 0 1\nf 7//1\n")
    with pytest.raises(ValueError):
        Obj(path)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        Obj("does-not-exist.obj")


def test_duplicate_object_name_keeps_first(tmp_path):
    path = tmp_path / "dup.obj"
    path.write_text("v 0 0 0\nvn 0 0 1\no A\nf 1//1\no A\nf 1//1\nf 1//1\n")
    mesh = Obj(path)
    assert len(mesh.objects) == 1
    assert len(mesh.objects["A"].faces) == 1


def test_load_materials(mtl_path):
    mesh = Obj()
    mesh.load_materials(mtl_path)
    shiny = mesh.materials["Shiny"]
    assert shiny.diffuse == (0.8, 0.1, 0.1)
    assert shiny.specular == (0.5, 0.5, 0.5)
    assert shiny.ambient == (1.0, 1.0, 1.0)
    assert shiny.shininess == 900
    assert shiny.specular_strength == 1.0
    assert mesh.materials["Dull"].shininess == 0


def test_load_materials_with_missing_block(tmp_path):
    path = tmp_path / "short.mtl"
    path.write_text("newmtl A\nKd 1 1 1\n")
    with pytest.raises(ValueError):
        Obj().load_materials(path)


def test_apply_materials_maps_shininess_range(obj_path, mtl_path):
    mesh = Obj(obj_path)
    mesh.load_materials(mtl_path)
    mesh.objects["Quad"].material_name = "Dull"
    mesh.apply_materials()
    tri = mesh.objects["Tri"].material
    assert tri.diffuse == (0.8, 0.1, 0.1)
    assert tri.shininess == 128
    assert mesh.objects["Quad"].material.shininess == 1
    assert mesh.materials["Shiny"].shininess == 900


def test_apply_materials_skips_unknown_names(obj_path):
    mesh = Obj(obj_path)
    before = mesh.objects["Tri"].material.copy()
    mesh.apply_materials()
    assert mesh.objects["Tri"].material == before


def test_apply_material_copies_fields():
    mesh = Obj()
    target = SceneObject()
    mesh.apply_material(target, BRONZE)
    assert target.material == BRONZE
    target.material.shininess = 0
    assert BRONZE.shininess == 52


def test_create_vertex_color():
    mesh = Obj()
    vertex = mesh.create_vertex_color(1, 2, 3, RED)
    assert vertex.colour == RED
    assert mesh.vertices == [vertex]
    assert mesh.create_vertex(0, 0, 0).colour == WHITE


def test_format_vertex():
    mesh = Obj()
    vertex = mesh.create_vertex(1, 2, 3)
    assert mesh.format_vertex(vertex) == ">[1.000000 2.000000 3.000000 1.000000]"


def test_reference_counting_and_pruning():
    mesh = Obj()
    kept = mesh.create_vertex(0, 0, 0)
    dropped = mesh.create_vertex(1, 1, 1)
    face = mesh.create_face()
    mesh.add_vertex_to_face(face, kept)
    mesh.add_vertex_to_face(face, kept)
    assert kept.references == 2
    assert face.vertices == [kept, kept]
    removed = mesh.prune_unreferenced_vertices()
    assert removed == [dropped]
    assert mesh.vertices == [kept]


def test_release_face_never_goes_negative():
    mesh = Obj()
    vertex = mesh.create_vertex(0, 0, 0)
    face = mesh.create_face(vertex)
    mesh.release_face(face)
    assert vertex.references == 0
    holder = mesh.create_face()
    mesh.add_vertex_to_face(holder, vertex)
    mesh.release_face(holder)
    assert vertex.references == 0


def test_set_normal_and_add_face():
    mesh = Obj()
    target = SceneObject()
    face = mesh.create_face(mesh.create_vertex(0, 0, 0))
    face.normals = [Vec4()]
    mesh.set_normal(face, 0, 0.0, 0.0, -1.0)
    mesh.add_face(target, face)
    assert target.faces == [face]
    assert face.normals[0] == Vec4(0.0, 0.0, -1.0, 1.0)