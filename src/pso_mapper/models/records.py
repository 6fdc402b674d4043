"""Raw map file entry."""

from dataclasses import dataclass

from pso_mapper.models.constants import RARE_FLAG_FIELD, RARE_FLAG_MASK


@dataclass(frozen=True, slots=True)
class EnemyEntry:
    """A 0x48-byte enemy placement entry from a map file.

    Only base, num_clones, skin and one bit of reserved[10] are interpreted.
    The rest is kept so entries can be dumped and compared whole.
    """
    base: int                   # family code, not a battle params index
    reserved0: int
    num_clones: int
    reserved: tuple[int, ...]   # 11 x uint32
    reserved12: float
    reserved13: int
    reserved14: int
    skin: int
    reserved15: int

    @property
    def is_rare(self) -> bool:
        return bool(self.reserved[RARE_FLAG_FIELD] & RARE_FLAG_MASK)

    @property
    def rare_bit(self) -> int:
        return 1 if self.is_rare else 0

    @property
    def skin_bit(self) -> int:
        return self.skin & 0x01

    @property
    def skin_mod3(self) -> int:
        return self.skin % 3
