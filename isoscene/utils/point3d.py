import math
from typing import Iterator, Optional, Tuple


def _components(point) -> Tuple[float, float, Optional[float]]:
    """
    Extrae (x, y, z) de otro punto. z es None si el operando es 2D
    (tupla de 2, pygame.math.Vector2 o cualquier cosa con .x/.y).
    """
    if isinstance(point, Vector3):
        return point.x, point.y, point.z
    if isinstance(point, (tuple, list)):
        if len(point) == 3:
            return point[0], point[1], point[2]
        if len(point) == 2:
            return point[0], point[1], None
        raise TypeError(f"Se esperaba un punto 2D o 3D, llegó {point!r}")
    # Vector2 de pygame no tiene .z (el swizzle lanza AttributeError)
    return point.x, point.y, getattr(point, "z", None)


class Vector3:
    """
    Punto/vector 3D (x, y, z).

    Las operaciones aritméticas (add, subtract, scale, normalize) SIEMPRE
    devuelven una instancia nueva. Lo único que muta es copy_from() y los
    setters: pensado para slots de "posición actual" que se pisan cada frame.
    """

    __hash__ = None  # mutable

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._x = x
        self._y = y
        self._z = z

    # ---------------------------
    # Componentes
    # ---------------------------
    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = value

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float) -> None:
        self._z = value

    # ---------------------------
    # Mutación explícita
    # ---------------------------
    def copy_from(self, point) -> None:
        """Sobrescribe las tres componentes in-place (sin alocar)."""
        x, y, z = _components(point)
        self._x = x
        self._y = y
        if z is not None:
            self._z = z

    # ---------------------------
    # Operaciones (alocan)
    # ---------------------------
    def add(self, point) -> "Vector3":
        """Si el otro punto es 2D, z queda igual (no se suma 0: no se toca)."""
        x, y, z = _components(point)
        return Vector3(self._x + x, self._y + y, self._z + z if z is not None else self._z)

    def subtract(self, point) -> "Vector3":
        x, y, z = _components(point)
        return Vector3(self._x - x, self._y - y, self._z - z if z is not None else self._z)

    def scale(self, factor: float) -> "Vector3":
        return Vector3(self._x * factor, self._y * factor, self._z * factor)

    def magnitude(self) -> float:
        return math.hypot(self._x, self._y, self._z)

    def normalize(self) -> "Vector3":
        """Vector unitario en la misma dirección; el vector nulo devuelve (0, 0, 0)."""
        m = self.magnitude()
        if m == 0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self._x / m, self._y / m, self._z / m)

    def distance_to(self, point) -> float:
        """Distancia euclídea en los tres ejes."""
        x, y, z = _components(point)
        dz = self._z - z if z is not None else 0.0
        return math.hypot(self._x - x, self._y - y, dz)

    def equals(self, point) -> bool:
        """
        Igualdad exacta componente a componente (sin epsilon).
        Solo compara contra puntos 3D: un punto 2D no tiene z y lanza TypeError.
        """
        x, y, z = _components(point)
        if z is None:
            raise TypeError(f"equals() necesita un punto 3D, llegó {point!r}")
        return self._x == x and self._y == y and self._z == z

    def copy(self) -> "Vector3":
        return Vector3(self._x, self._y, self._z)

    def to_tuple(self) -> Tuple[float, float, float]:
        return self._x, self._y, self._z

    # ---------------------------
    # Azúcar
    # ---------------------------
    def __iter__(self) -> Iterator[float]:
        return iter((self._x, self._y, self._z))

    def __add__(self, other) -> "Vector3":
        return self.add(other)

    def __sub__(self, other) -> "Vector3":
        return self.subtract(other)

    def __mul__(self, factor: float) -> "Vector3":
        return self.scale(factor)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Vector3({self._x!r}, {self._y!r}, {self._z!r})"

