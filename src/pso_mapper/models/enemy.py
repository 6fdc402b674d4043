"""Decoded enemy entity handed to the game instance."""

from dataclasses import dataclass


@dataclass(slots=True)
class Enemy:
    """One spawned enemy, including every clone and escort.

    hit_flags, last_hit and experience start as decoded; the owning game
    may change them during combat.
    """
    id: int
    source_type: int            # base code of the map entry that spawned it
    experience: int = 0
    rt_index: int | None = None
    hit_flags: int = 0
    last_hit: int = 0

    @property
    def is_clone(self) -> bool:
        return self.rt_index is None

    def __str__(self) -> str:
        rt_index = "--" if self.rt_index is None else f"{self.rt_index:X}"
        return (
            f"[Enemy E-{self.id:X} source_type={self.source_type:X} "
            f"hit={self.hit_flags:02X}/{self.last_hit} exp={self.experience} "
            f"rt_index={rt_index}]"
        )
