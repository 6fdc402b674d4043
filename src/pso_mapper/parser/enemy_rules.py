"""Per-family spawn rules for map entries, keyed by base type code.

Each base code maps to an EnemyRule: an ordered tuple of variants. The
parser uses the first variant whose condition holds, so rare, alt-enemies
and episode checks are listed before the plain skin-indexed fallback.

A variant describes:
  - the primary spawn: a battle params row selector and an rt_index selector,
    or None when the entry spawns nothing by itself
  - typed escorts: fixed-count companions with their own row and rt_index
  - generic escort clones and how the entry's num_clones field is used

The row selectors are not derivable from the rt_index; several rare
variants read a lower row than their common form. Keep the table literal.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pso_mapper.models.constants import RT_INDEX_UNCLASSIFIED, Difficulty, Episode
from pso_mapper.models.records import EnemyEntry


@dataclass(frozen=True, slots=True)
class MapContext:
    """Map-wide parameters every selector may consult."""
    episode: int
    difficulty: int
    alt_enemies: bool


Selector = Callable[[EnemyEntry, MapContext], int]
Condition = Callable[[EnemyEntry, MapContext], bool]


class CloneMode(Enum):
    """How an entry's num_clones field turns into generic clones."""
    TAIL = "tail"               # generic_clones + num_clones after everything else
    FIXED = "fixed"             # generic_clones only; num_clones ignored
    DEFAULT = "default"         # num_clones, or generic_clones when it is 0
    COMPANIONS = "companions"   # num_clones typed companions, no tail


@dataclass(frozen=True, slots=True)
class Escort:
    count: int
    stat_index: int
    rt_index: int


@dataclass(frozen=True, slots=True)
class Spawn:
    """A resolved (battle params row, rt_index) pair."""
    stat_index: int
    rt_index: int


@dataclass(frozen=True, slots=True)
class RuleVariant:
    stat_index: Selector | None
    rt_index: Selector | None
    when: Condition | None = None
    escorts: tuple[Escort, ...] = ()
    generic_clones: int = 0
    clone_mode: CloneMode = CloneMode.TAIL
    companion: Escort | None = None     # COMPANIONS only; count is unused

    def applies(self, entry: EnemyEntry, ctx: MapContext) -> bool:
        return self.when is None or self.when(entry, ctx)

    def primary(self, entry: EnemyEntry, ctx: MapContext) -> Spawn | None:
        if self.stat_index is None or self.rt_index is None:
            return None
        return Spawn(self.stat_index(entry, ctx), self.rt_index(entry, ctx))

    def clone_count(self, entry: EnemyEntry) -> int:
        """Number of generic clones emitted after the primary and escorts."""
        if self.clone_mode is CloneMode.FIXED:
            return self.generic_clones
        if self.clone_mode is CloneMode.DEFAULT:
            return entry.num_clones or self.generic_clones
        if self.clone_mode is CloneMode.COMPANIONS:
            return 0
        return self.generic_clones + entry.num_clones

    def companion_count(self, entry: EnemyEntry) -> int:
        if self.clone_mode is CloneMode.COMPANIONS:
            return entry.num_clones
        return 0


@dataclass(frozen=True, slots=True)
class EnemyRule:
    name: str
    variants: tuple[RuleVariant, ...]

    def resolve(self, entry: EnemyEntry, ctx: MapContext) -> RuleVariant | None:
        """Return the first applicable variant, or None to spawn nothing."""
        for variant in self.variants:
            if variant.applies(entry, ctx):
                return variant
        return None


# --- Selector helpers ---

def _const(value: int) -> Selector:
    return lambda e, ctx: value


def _skin2(base: int) -> Selector:
    return lambda e, ctx: base + e.skin_bit


def _skin3(base: int) -> Selector:
    return lambda e, ctx: base + e.skin_mod3


def _rare(base: int) -> Selector:
    return lambda e, ctx: base + e.rare_bit


def _if_rare(rare: int, common: int) -> Selector:
    return lambda e, ctx: rare if e.is_rare else common


def _rule(name: str, stat_index: Selector | int | None, rt_index: Selector | int | None,
          **kwargs) -> EnemyRule:
    """Build a single-variant rule. Ints are wrapped as constant selectors."""
    return EnemyRule(name, (_variant(stat_index, rt_index, **kwargs),))


def _variant(stat_index: Selector | int | None, rt_index: Selector | int | None,
             **kwargs) -> RuleVariant:
    if isinstance(stat_index, int):
        stat_index = _const(stat_index)
    if isinstance(rt_index, int):
        rt_index = _const(rt_index)
    return RuleVariant(stat_index, rt_index, **kwargs)


def _in_episode(episode: Episode, *, alt: bool | None = None) -> Condition:
    if alt is None:
        return lambda e, ctx: ctx.episode == episode
    return lambda e, ctx: ctx.episode == episode and ctx.alt_enemies == alt


_NO_SPAWN = RuleVariant(None, None)


ENEMY_RULES: dict[int, EnemyRule] = {
    # --- Episode I ---
    0x40: _rule("Hildebear / Hildetorr", _skin2(0x49), _skin2(1)),
    0x41: EnemyRule("Rappy family", (
        # Del Rappy / Sand Rappy
        _variant(_skin2(0x17), _skin2(17), when=_in_episode(Episode.EP4, alt=True)),
        _variant(_skin2(0x05), _skin2(17), when=_in_episode(Episode.EP4)),
        # Al Rappy, or a seasonal rare Rappy in Episode II
        _variant(0x19, RT_INDEX_UNCLASSIFIED, when=lambda e, ctx: bool(e.skin_bit)),
        _variant(0x18, 5),
    )),
    0x42: _rule("Monest + 30 Mothmants", 0x01, 4, escorts=(Escort(30, 0x00, 3),)),
    0x43: _rule("Savage Wolf / Barbarous Wolf", _rare(0x02), _rare(7)),
    0x44: _rule("Booma family", _skin3(0x4B), _skin3(9)),
    0x60: _rule("Grass Assassin", 0x4E, 12),
    0x61: EnemyRule("Lily family", (
        _variant(0x25, 83, when=_in_episode(Episode.EP2, alt=True)),    # Del Lily
        _variant(_rare(0x04), _rare(13)),
    )),
    0x62: _rule("Nano Dragon", 0x1A, 15),
    0x63: _rule("Shark family", _skin3(0x4F), _skin3(16)),
    0x64: _rule("Pofuilly Slime + 4 clones", _if_rare(0x2F, 0x30), _rare(19),
                escorts=(Escort(4, 0x30, 19),)),
    0x65: _rule("Pan Arms, Migium, Hidoom", 0x31, 21,
                escorts=(Escort(1, 0x32, 22), Escort(1, 0x33, 23))),
    0x80: _rule("Dubchic / Gillchic", _skin2(0x1B),
                lambda e, ctx: 50 if e.skin_bit else 24),
    0x81: _rule("Garanz", 0x1D, 25),
    0x82: _rule("Sinow Beat / Sinow Gold", _if_rare(0x13, 0x06), _rare(26),
                generic_clones=4, clone_mode=CloneMode.DEFAULT),
    0x83: _rule("Canadine", 0x07, 28),
    0x84: _rule("Canadine group", 0x09, 29, escorts=(Escort(8, 0x08, 28),)),
    0x85: EnemyRule("Dubwitch", (_NO_SPAWN,)),
    0xA0: _rule("Delsaber", 0x52, 30),
    0xA1: _rule("Chaos Sorcerer + 2 Bits", 0x0A, 31,
                generic_clones=2, clone_mode=CloneMode.FIXED),
    0xA2: _rule("Dark Gunner", 0x1E, 34),
    0xA4: _rule("Chaos Bringer", 0x0D, 36),
    0xA5: _rule("Dark Belra", 0x0E, 37),
    0xA6: _rule("Dimenian family", _skin3(0x53), _skin3(41)),
    0xA7: _rule("Bulclaw + 4 Claws", 0x1F, 40, escorts=(Escort(4, 0x20, 38),)),
    0xA8: _rule("Claw", 0x20, 38),

    # --- Bosses ---
    0xC0: EnemyRule("Dragon / Gal Gryphon", (
        _variant(0x12, 44, when=_in_episode(Episode.EP1)),
        _variant(0x1E, 77, when=_in_episode(Episode.EP2)),
    )),
    0xC1: _rule("De Rol Le", 0x0F, 45),
    0xC2: EnemyRule("Vol Opt form 1", (_NO_SPAWN,)),
    0xC5: _rule("Vol Opt form 2", 0x25, 46),
    # Second form on Normal, final form otherwise
    0xC8: _rule("Dark Falz + 510 helpers",
                lambda e, ctx: 0x37 if ctx.difficulty == Difficulty.NORMAL else 0x38, 47,
                escorts=(Escort(510, 0x35, 0),)),
    0xCA: _rule("Olga Flow", 0x2C, 78, generic_clones=0x200),
    0xCB: _rule("Barba Ray", 0x0F, 73, generic_clones=0x2F),
    0xCC: _rule("Gol Dragon", 0x12, 76, generic_clones=5),

    # --- Episode II ---
    0xD4: _rule("Sinow Berill / Sinow Spigell", _if_rare(0x13, 0x06), _rare(62),
                generic_clones=4),
    0xD5: _rule("Merillia / Meriltas", _skin2(0x4B), _skin2(52)),
    0xD6: _rule("Mericarol family",
                lambda e, ctx: 0x44 + e.skin_mod3 if e.skin else 0x3A, _skin3(56)),
    0xD7: _rule("Ul Gibbon / Zol Gibbon", _skin2(0x3B), _skin2(59)),
    0xD8: _rule("Gibbles", 0x3D, 61),
    0xD9: _rule("Gee", 0x07, 54),
    0xDA: _rule("Gi Gue", 0x1A, 55),
    0xDB: _rule("Deldepth", 0x30, 71),
    0xDC: _rule("Delbiter", 0x0D, 72),
    0xDD: _rule("Dolmolm / Dolmdarl", _skin2(0x4F), _skin2(64)),
    0xDE: _rule("Morfos", 0x40, 66),
    0xDF: _rule("Recobox + Recons", 0x41, 67,
                clone_mode=CloneMode.COMPANIONS, companion=Escort(0, 0x42, 68)),
    0xE0: EnemyRule("Epsilon / Sinow Zoa / Sinow Zele", (
        _variant(0x23, 84, when=_in_episode(Episode.EP2, alt=True),
                 generic_clones=4),
        _variant(_skin2(0x43), _skin2(69)),
    )),
    0xE1: _rule("Ill Gill", 0x26, 82),

    # --- Episode IV ---
    0x110: _rule("Astark", 0x09, 1),
    0x111: _rule("Satellite Lizard / Yowie",
                 lambda e, ctx: 0x0D + e.rare_bit + (0x10 if ctx.alt_enemies else 0),
                 lambda e, ctx: 2 + (1 - e.rare_bit)),
    0x112: _rule("Merissa A / Merissa AA", _skin2(0x19), _skin2(4)),
    0x113: _rule("Girtablulu", 0x1F, 6),
    0x114: _rule("Zu / Pazuzu",
                 lambda e, ctx: 0x0B + e.skin_bit + (0x14 if ctx.alt_enemies else 0),
                 _skin2(7)),
    0x115: EnemyRule("Boota family", (
        _variant(0x03, _skin3(9), when=lambda e, ctx: bool(e.skin & 0x02)),
        _variant(_skin3(0x00), _skin3(9)),
    )),
    0x116: _rule("Dorphon / Dorphon Eclair", _skin2(0x0F), _skin2(12)),
    0x117: _rule("Goran family", _skin3(0x11),
                 lambda e, ctx: 15 if e.skin & 0x02 else (16 if e.skin_bit else 14)),
    0x119: _rule("Saint Million / Shambertin / Kondrieu", 0x22,
                 lambda e, ctx: 21 if e.is_rare else 19 + e.skin_bit),
}
