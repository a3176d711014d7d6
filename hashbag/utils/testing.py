class Colliding:
    """Element with a caller-chosen hash, used to place distinct elements in the same bucket."""

    def __init__(self, name: str, hash_value: int = 0) -> None:
        self.name = name
        self.hash_value = hash_value

    def __eq__(self, other) -> bool:
        return isinstance(other, Colliding) and self.name == other.name

    def __hash__(self) -> int:
        return self.hash_value

    def __repr__(self) -> str:
        return f"Colliding({self.name!r})"
