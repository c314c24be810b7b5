import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """
    Protocol for DTO identity strategies.
    Every DTO instance, including clones, receives a fresh value.
    """

    def next_id(self) -> str:
        """Generates the next unique identifier."""
        ...


class UUID4Generator(IIDGenerator):
    """
    Default ID generator using UUIDv4.
    """

    def next_id(self) -> str:
        """Returns a string representation of a random UUIDv4."""
        return str(uuid.uuid4())
