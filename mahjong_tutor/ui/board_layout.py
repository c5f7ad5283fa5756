"""Board layout rendering using Rich."""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from mahjong_tutor.coach.advice import Advice
from mahjong_tutor.core.tile import sort_hand
from mahjong_tutor.engine.action import AvailableActions
from mahjong_tutor.engine.state import GameResult, Outcome
from mahjong_tutor.player.base import GameView, OpponentView
from mahjong_tutor.ui.i18n import difficulty_name, t
from mahjong_tutor.ui.tile_display import (
    _tile_display_width, format_discard_pool, tile_to_display_str,
    tile_to_rich_text, tiles_to_rich_text,
)

DISCARD_ROW_WIDTH = 12


def display_tiles(game_view: GameView) -> List[int]:
    """Hand tiles in display order: sorted closed tiles, drawn tile last."""
    tiles = sort_hand(game_view.my_hand.closed)
    if game_view.drawn_tile is not None:
        tiles.append(game_view.drawn_tile)
    return tiles


def render_board(console: Console, game_view: GameView, difficulty=None,
                 clear: bool = True):
    """Render the full board state."""
    if clear:
        console.clear()

    header = Text()
    header.append(f"  {t('label.remaining', n=game_view.remaining_tiles)}")
    header.append(f"   {t('label.kans', n=game_view.kan_count)}")
    if difficulty is not None:
        header.append(f"   {t('label.difficulty', level=difficulty_name(difficulty))}")
    if game_view.last_discard is not None:
        header.append(f"\n  {t('label.last_discard')}")
        header.append_text(tile_to_rich_text(game_view.last_discard))
        header.append(f" ({_seat_name(game_view, game_view.last_discard_player)})")

    console.print(Panel(header, title=f"[bold]{t('label.game_title')}[/bold]",
                        border_style="cyan"))

    for opp in game_view.opponents:
        _render_opponent_row(console, opp, game_view)

    console.print("─" * 60, style="dim")

    _render_player_hand(console, game_view)


def _seat_name(game_view: GameView, seat: Optional[int]) -> str:
    if seat is None or seat == game_view.my_seat:
        return t("label.you")
    for opp in game_view.opponents:
        if opp.seat == seat:
            return opp.name
    return "?"


def _render_melds(console: Console, melds):
    if not melds:
        return
    meld_text = Text(f"  {t('label.melds')}")
    for i, meld in enumerate(melds):
        if i > 0:
            meld_text.append(" | ")
        meld_text.append_text(tiles_to_rich_text(meld.tiles))
    console.print(meld_text)


def _render_opponent_row(console: Console, opp: OpponentView, game_view: GameView):
    """Render one opponent's header + melds + discard pool."""
    turn_mark = " [bold yellow]◀[/bold yellow]" if opp.seat == game_view.current_seat else ""
    console.print(
        f"  [bold]{opp.name}[/bold]  "
        f"[dim]{t('label.hidden_tiles', n=opp.num_closed_tiles)}[/dim]{turn_mark}"
    )

    _render_melds(console, opp.melds)

    discard_text = Text(f"  {t('label.discards')}")
    if opp.discard_pool:
        is_last = game_view.last_discard_player == opp.seat
        discard_text.append_text(format_discard_pool(
            opp.discard_pool, last_tile_marked=is_last, width=DISCARD_ROW_WIDTH))
        console.print(discard_text)
    else:
        console.print(discard_text, style="dim")

    console.print()


def _render_player_hand(console: Console, game_view: GameView):
    """Render the human's discards, then the hand with number labels."""
    hand = game_view.my_hand
    riichi_mark = f" [bold red]{t('label.riichi')}[/bold red]" if game_view.is_riichi else ""
    console.print(
        f"  [bold cyan]{t('label.your_hand')}[/bold cyan]  "
        f"{t('label.points', score=game_view.my_score)}{riichi_mark}"
    )

    if hand.discards:
        discard_text = Text(f"  {t('label.discards')}")
        discard_text.append_text(format_discard_pool(
            list(hand.discards), width=DISCARD_ROW_WIDTH))
        console.print(discard_text)

    tiles = display_tiles(game_view)
    drawn = game_view.drawn_tile
    num_closed = len(tiles) - (1 if drawn is not None else 0)

    COL_WIDTH = 5  # Fixed display column width per tile slot

    tile_names = [f"[{tile_to_display_str(tile)}]" for tile in tiles]

    # Number row - pad each number to match tile column width
    num_text = Text("  ")
    for i in range(len(tiles)):
        is_drawn = i == num_closed
        if is_drawn:
            num_text.append(" ")  # gap before draw tile
        label = str(i + 1)
        cell_width = max(COL_WIDTH, _tile_display_width(tile_names[i]) + 1)
        pad_total = cell_width - len(label)
        pad_left = pad_total // 2
        num_text.append(" " * pad_left + label + " " * (pad_total - pad_left),
                        style="dim cyan" if is_drawn else "dim")
    console.print(num_text)

    # Tile row
    tile_text = Text("  ")
    for i, tile in enumerate(tiles):
        is_drawn = i == num_closed
        if is_drawn:
            tile_text.append(" ")
        tile_text.append_text(tile_to_rich_text(tile, highlight=is_drawn))
        gap = max(1, COL_WIDTH - _tile_display_width(tile_names[i]))
        tile_text.append(" " * gap)
    console.print(tile_text)

    _render_melds(console, hand.melds)
    console.print()


def render_action_prompt(console: Console, available: AvailableActions):
    """Render available actions."""
    actions = []
    if available.can_tsumo:
        actions.append(t("action.tsumo"))
    if available.can_ron:
        actions.append(t("action.ron"))
    if available.can_riichi:
        actions.append(t("action.riichi"))
    if available.can_pon:
        actions.append(t("action.pon"))
    if available.can_chi:
        actions.append(t("action.chi"))
    if available.can_kan:
        actions.append(t("action.kan"))

    if actions:
        console.print(f"  [bold yellow]{t('action.available')} {' '.join(actions)}[/bold yellow]")


def render_advice(console: Console, advice: Optional[Advice] = None,
                  tip: Optional[str] = None):
    """Render the coach's suggestion, or a static tip when advice failed."""
    if advice is not None:
        body = Text()
        body.append(f"{advice.suggestion}\n", style="bold")
        body.append(advice.reason)
        console.print(Panel(body, title=f"[bold]{t('label.coach')}[/bold]",
                            border_style="magenta"))
    elif tip:
        console.print(Panel(tip, title=f"[bold]{t('label.tip')}[/bold]",
                            border_style="magenta"))


def render_result(console: Console, result: GameResult, player_names: List[str],
                  final_score: int, winning_tile: Optional[int] = None):
    """Render the end-of-game panel: tsumo, ron or exhaustive draw."""
    console.print()
    if result.outcome == Outcome.EXHAUSTIVE_DRAW:
        console.print(Panel(f"[bold yellow]{t('msg.exhaustive_draw')}[/bold yellow]",
                            border_style="yellow"))
    else:
        winner = player_names[result.winner]
        if result.outcome == Outcome.TSUMO:
            msg = t("msg.tsumo_win", player=winner)
        else:
            msg = t("msg.ron_win", player=winner, loser=player_names[result.loser])
        style = "green" if result.human_won else "red"
        body = Text(msg, style=f"bold {style}")
        if winning_tile is not None:
            body.append("  ")
            body.append_text(tile_to_rich_text(winning_tile, highlight=True))
        console.print(Panel(body, border_style=style))

    if result.score_change:
        sign = "+" if result.score_change > 0 else ""
        console.print(f"  {t('msg.score_change', change=f'{sign}{result.score_change}')}")
    console.print(f"  {t('msg.final_score', score=final_score)}")
    console.print()


def render_game_summary(console: Console, summary: dict, human_name: str, last: int = 8):
    """Render the recorded game: starting hand, action count and the closing moves."""
    actions = summary["actions"]
    body = Text()
    start = summary["initial_hands"].get(human_name)
    if start:
        body.append(t("label.starting_hand"), style="dim")
        body.append(" ".join(start))
        body.append("\n")
    body.append(t("label.action_count", n=len(actions)), style="dim")

    # Draws are noise here; the record keeps them for the log
    shown = [a for a in actions if a["action"] != "draw"][-last:]
    for entry in shown:
        body.append(f"\n  {entry['player']}: ")
        body.append(t(f"action.{entry['action']}"), style="bold")
        if "tiles" in entry:
            body.append(" " + " ".join(entry["tiles"]))
        elif entry.get("tile"):
            body.append(f" {entry['tile']}")
        if entry.get("from_player"):
            body.append(f" ({t('label.from_player', player=entry['from_player'])})", style="dim")
    console.print(Panel(body, title=f"[bold]{t('label.game_record')}[/bold]",
                        border_style="blue"))
