from enum import Enum

from isoscene.errors import InvalidDirection


class WallDirection(Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"

    @classmethod
    def parse(cls, value) -> "WallDirection":
        """Acepta el miembro, su valor o su nombre (sin importar mayúsculas)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidDirection(value)
