import numpy as np
import pytest

from particle_sim.vector import Vector3


def test_square_magnitude_sums_all_three_axes():
    """
    x² + y² + z², with distinct components so a duplicated axis shows up:
      (1, 2, 3) -> 1 + 4 + 9 = 14   (13 if y were counted twice)
    """
    assert Vector3(1.0, 2.0, 3.0).square_magnitude() == 14.0
    assert Vector3(3.0, 4.0, 12.0).square_magnitude() == 169.0
    assert Vector3(3.0, 4.0, 12.0).magnitude() == 13.0
    assert Vector3(0.0, 0.0, -2.0).magnitude() == 2.0


@pytest.mark.parametrize("xyz", [
    (1.0, 0.0, 0.0),
    (3.0, -4.0, 12.0),
    (1e-8, 2e-8, -3e-8),
    (123.0, 0.5, -77.25),
])
def test_normalize_gives_unit_length(xyz):
    v = Vector3(*xyz)
    direction = v.as_array() / np.linalg.norm(xyz)
    v.normalize()
    assert v.magnitude() == pytest.approx(1.0, abs=1e-12)
    assert np.allclose(v.as_array(), direction)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError, match="zero vector"):
        Vector3().normalize()
    with pytest.raises(ValueError):
        Vector3().normalized()


def test_normalized_leaves_original_untouched():
    v = Vector3(0.0, 5.0, 0.0)
    u = v.normalized()
    assert u == Vector3(0.0, 1.0, 0.0)
    assert v == Vector3(0.0, 5.0, 0.0)


def test_vector_product_is_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    assert a % b == -(b % a)
    assert a % a == Vector3()
    assert a.vector_product(b) == a % b


def test_vector_product_right_hand_rule():
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    z = Vector3(0.0, 0.0, 1.0)
    assert x % y == z
    assert y % z == x
    assert z % x == y
    # (y·z2 − z·y2, z·x2 − x·z2, x·y2 − y·x2)
    assert Vector3(1.0, 2.0, 3.0) % Vector3(4.0, 5.0, 6.0) == Vector3(-3.0, 6.0, -3.0)


def test_scalar_and_component_products():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert a.scalar_product(b) == 32.0
    assert a * b == 32.0
    assert a.component_product(b) == Vector3(4.0, 10.0, 18.0)

    a.component_product_update(b)
    assert a == Vector3(4.0, 10.0, 18.0)


def test_add_sub_scale_are_pure():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, 0.5, 0.5)
    assert a.add(b) == Vector3(1.5, 2.5, 3.5)
    assert a - b == Vector3(0.5, 1.5, 2.5)
    assert a.scale(2.0) == Vector3(2.0, 4.0, 6.0)
    assert 2 * a == a * 2
    assert a == Vector3(1.0, 2.0, 3.0)
    assert b == Vector3(0.5, 0.5, 0.5)


def test_add_scaled_vector_updates_in_place():
    v = Vector3(1.0, 1.0, 1.0)
    same = v
    v.add_scaled_vector(Vector3(1.0, 2.0, 3.0), 2.0)
    assert same is v
    assert v == Vector3(3.0, 5.0, 7.0)


def test_invert_and_clear():
    v = Vector3(1.0, -2.0, 3.0)
    v.invert()
    assert v == Vector3(-1.0, 2.0, -3.0)
    v.clear()
    assert v == Vector3()


def test_array_conversion_honours_copy_argument():
    v = Vector3(1.0, 2.0, 3.0)

    view = v.__array__(copy=False)
    view[0] = 9.0
    assert v.x == 9.0

    detached = v.__array__(copy=True)
    detached[1] = -1.0
    assert v.y == 2.0

    assert v.__array__(dtype=np.float32).dtype == np.float32
    with pytest.raises(ValueError):
        v.__array__(dtype=np.float32, copy=False)


def test_components_and_conversion():
    v = Vector3.from_array([1, 2, 3])
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
    v.y = 7.5
    x, y, z = v
    assert (x, y, z) == (1.0, 7.5, 3.0)
    assert np.asarray(v).dtype == np.float64

    c = v.copy()
    c.x = 100.0
    assert v.x == 1.0

    with pytest.raises(ValueError):
        Vector3.from_array([1.0, 2.0])


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vector3() * "2"
    with pytest.raises(TypeError):
        Vector3() + 1.0
