import numpy as np
import pytest

from baryon_math.vec import Shape, SCALAR_SIZE, Vec2, Vec3, Vec4


def test_shapes_follow_declaration_order():
    assert Vec2.shape().fields == ("x", "y")
    assert Vec3.shape().fields == ("x", "y", "z")
    assert Vec4.shape().fields == ("x", "y", "z", "w")
    assert Vec4.shape().name == "Vec4"


def test_dtype_is_packed_float32_in_field_order():
    for cls in (Vec2, Vec3, Vec4):
        shape = cls.shape()
        assert shape.dtype.itemsize == SCALAR_SIZE * shape.size
        assert shape.nbytes == 4 * shape.size
        for i, name in enumerate(shape.fields):
            member_dtype, offset = shape.dtype.fields[name][:2]
            assert member_dtype == np.float32
            assert offset == 4 * i


def test_instances_hold_only_their_fields():
    v = Vec3(1.0, 2.0, 3.0)
    assert not hasattr(v, "__dict__")
    assert type(v).__slots__ == ("x", "y", "z")


def test_index_and_unknown_axis():
    assert Vec4.shape().index("w") == 3
    with pytest.raises(ValueError):
        Vec2.shape().index("z")


def test_shape_rejects_bad_definitions():
    with pytest.raises(ValueError):
        Shape("Vec1", ("x",))
    with pytest.raises(ValueError):
        Shape("Vec5", ("x", "y", "z", "w", "v"))
    with pytest.raises(ValueError):
        Shape("Dup", ("x", "x"))
    with pytest.raises(ValueError):
        Shape("Bad", ("x", "not a name"))
    with pytest.raises(ValueError):
        Shape("", ("x", "y"))


def test_shape_components_reads_fields_in_order():
    v = Vec3(1.0, 2.0, 3.0)
    assert Vec3.shape().components(v) == (1.0, 2.0, 3.0)


def test_type_aliases_export_only_what_is_defined():
    from baryon_math.utils import types

    assert "ArrayLike" not in types.__all__
    for name in types.__all__:
        assert hasattr(types, name)
