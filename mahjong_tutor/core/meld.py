"""Meld (副露) data structures for Chi/Pon/Kan."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MeldType(Enum):
    CHI = "chi"        # 吃
    PON = "pon"        # 碰
    ANKAN = "ankan"    # 暗杠
    MINKAN = "minkan"  # 明杠 (open kan from a discard)


@dataclass(frozen=True)
class Meld:
    """A frozen meld.

    Attributes:
        meld_type: Type of meld
        tiles: All tiles in the meld, sorted
        called_tile: The tile that was claimed (None for ankan)
        from_player: Seat the tile was claimed from (None for ankan)
    """
    meld_type: MeldType
    tiles: tuple
    called_tile: Optional[int] = None
    from_player: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.meld_type != MeldType.ANKAN

    @property
    def is_kan(self) -> bool:
        return self.meld_type in (MeldType.ANKAN, MeldType.MINKAN)

    @property
    def claimed_from_discard(self) -> bool:
        return self.called_tile is not None
