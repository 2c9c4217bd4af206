"""Small built-in OBJ documents for demos and smoke tests."""

CUBE_OBJ = """# Simple cube
v -1.0 -1.0 1.0
v 1.0 -1.0 1.0
v 1.0 1.0 1.0
v -1.0 1.0 1.0
v -1.0 -1.0 -1.0
v 1.0 -1.0 -1.0
v 1.0 1.0 -1.0
v -1.0 1.0 -1.0

vn 0.0 0.0 1.0
vn 0.0 0.0 -1.0
vn 0.0 1.0 0.0
vn 0.0 -1.0 0.0
vn 1.0 0.0 0.0
vn -1.0 0.0 0.0

f 1//1 2//1 3//1 4//1
f 5//2 8//2 7//2 6//2
f 4//3 3//3 7//3 8//3
f 5//4 6//4 2//4 1//4
f 2//5 6//5 7//5 3//5
f 5//6 1//6 4//6 8//6
"""

PYRAMID_OBJ = """# Simple pyramid
v 0.0 1.0 0.0
v -1.0 0.0 1.0
v 1.0 0.0 1.0
v 1.0 0.0 -1.0
v -1.0 0.0 -1.0

vn 0.0 0.447 0.894
vn 0.894 0.447 0.0
vn 0.0 0.447 -0.894
vn -0.894 0.447 0.0
vn 0.0 -1.0 0.0

f 1//1 2//1 3//1
f 1//2 3//2 4//2
f 1//3 4//3 5//3
f 1//4 5//4 2//4
f 2//5 5//5 4//5
f 2//5 4//5 3//5
"""

TETRAHEDRON_OBJ = """# Simple tetrahedron
v 0.0 1.0 0.0
v -1.0 -1.0 1.0
v 1.0 -1.0 1.0
v 0.0 -1.0 -1.0

f 1 2 3
f 1 3 4
f 1 4 2
f 2 4 3
"""

_SAMPLES = {
    "cube": CUBE_OBJ,
    "pyramid": PYRAMID_OBJ,
    "tetrahedron": TETRAHEDRON_OBJ,
}


def sample_obj(shape: str = "cube") -> str:
    """Return OBJ text for ``cube``, ``pyramid`` or ``tetrahedron``.

    Unknown names fall back to the cube.
    """
    return _SAMPLES.get((shape or "").lower().strip(), CUBE_OBJ)
