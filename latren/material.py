"""Materials: a shader, an optional texture and typed uniform values."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from .text import TEXTURE_NONE


class UniformType(Enum):
    INT = "int"
    FLOAT = "float"
    VEC2 = "vec2"
    VEC3 = "vec3"
    VEC4 = "vec4"
    MAT2 = "mat2"
    MAT3 = "mat3"
    MAT4 = "mat4"


_VECTORS = {UniformType.VEC2: 2, UniformType.VEC3: 3, UniformType.VEC4: 4}
_MATRICES = {UniformType.MAT2: 2, UniformType.MAT3: 3, UniformType.MAT4: 4}
_VECTOR_BY_SIZE = {n: kind for kind, n in _VECTORS.items()}
_MATRIX_BY_SIZE = {n: kind for kind, n in _MATRICES.items()}

_DEFAULTS: tuple[tuple[UniformType, str, Any], ...] = (
    (UniformType.INT, "fog.use", 0),
    (UniformType.FLOAT, "opacity", 1.0),
    (UniformType.VEC3, "color", (1.0, 1.0, 1.0)),
)


def _as_kind(kind: Any) -> UniformType:
    if isinstance(kind, UniformType):
        return kind
    try:
        return UniformType(kind)
    except ValueError:
        raise TypeError(f"invalid uniform type {kind!r}") from None


def _zero(kind: UniformType) -> Any:
    if kind is UniformType.INT:
        return 0
    if kind is UniformType.FLOAT:
        return 0.0
    if kind in _VECTORS:
        return (0.0,) * _VECTORS[kind]
    n = _MATRICES[kind]
    return tuple((0.0,) * n for _ in range(n))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _infer_kind(value: Any) -> UniformType:
    if isinstance(value, numbers.Integral):
        return UniformType.INT
    if isinstance(value, numbers.Real):
        return UniformType.FLOAT
    if _is_sequence(value):
        if value and all(_is_sequence(row) for row in value):
            kind = _MATRIX_BY_SIZE.get(len(value))
        else:
            kind = _VECTOR_BY_SIZE.get(len(value))
        if kind is not None:
            return kind
    raise TypeError(f"invalid uniform value {value!r}")


def _vector(value: Any, n: int) -> tuple[float, ...]:
    if not _is_sequence(value) or len(value) != n:
        raise TypeError(f"expected {n} components, got {value!r}")
    if not all(isinstance(c, numbers.Real) for c in value):
        raise TypeError(f"non-numeric component in {value!r}")
    return tuple(float(c) for c in value)


def _coerce(value: Any, kind: UniformType) -> Any:
    if kind is UniformType.INT:
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"expected an integer, got {value!r}")
        return int(value)
    if kind is UniformType.FLOAT:
        if not isinstance(value, numbers.Real):
            raise TypeError(f"expected a number, got {value!r}")
        return float(value)
    if kind in _VECTORS:
        return _vector(value, _VECTORS[kind])
    n = _MATRICES[kind]
    if not _is_sequence(value) or len(value) != n:
        raise TypeError(f"expected a {n}x{n} matrix, got {value!r}")
    return tuple(_vector(row, n) for row in value)


class Material:
    """A shader with a texture and named uniform values of fixed types.

    Every material starts with the uniforms ``fog.use`` (int 0),
    ``opacity`` (float 1.0) and ``color`` (vec3 of ones).
    """

    def __init__(
        self,
        shader: Any = None,
        texture: int = TEXTURE_NONE,
        uniforms: Mapping[str, Any] | None = None,
        *,
        cull_faces: bool = True,
    ) -> None:
        self.shader = shader
        self.texture = texture
        self.cull_faces = cull_faces
        self._uniforms: dict[UniformType, dict[str, Any]] = {kind: {} for kind in UniformType}
        self.restore_default_uniforms()
        for name, value in (uniforms or {}).items():
            self.set_uniform(name, value)

    def set_uniform(self, name: str, value: Any, kind: UniformType | str | None = None) -> None:
        """Store ``value`` as uniform ``name``; the type is inferred when not given."""
        resolved = _infer_kind(value) if kind is None else _as_kind(kind)
        self._uniforms[resolved][name] = _coerce(value, resolved)

    def get_uniform(self, name: str, kind: UniformType | str) -> Any:
        """Return uniform ``name`` of ``kind``, creating it with a zero value if absent."""
        resolved = _as_kind(kind)
        return self._uniforms[resolved].setdefault(name, _zero(resolved))

    def uniforms_of(self, kind: UniformType | str) -> dict[str, Any]:
        """A copy of all uniforms of ``kind``."""
        return dict(self._uniforms[_as_kind(kind)])

    def clear_uniforms(self) -> None:
        for table in self._uniforms.values():
            table.clear()

    def restore_default_uniforms(self) -> None:
        """Reset the default uniforms to their initial values."""
        for kind, name, value in _DEFAULTS:
            self._uniforms[kind][name] = value