"""User input handling for the terminal UI."""

from typing import List, Optional, Sequence, Union

from rich.console import Console

from mahjong_tutor.core.player_state import HUMAN_SEAT
from mahjong_tutor.engine.action import Action, ActionType, AvailableActions
from mahjong_tutor.player.base import GameView
from mahjong_tutor.ui.board_layout import display_tiles
from mahjong_tutor.ui.i18n import t
from mahjong_tutor.ui.tile_display import tile_to_display_str

# Commands that are not game actions
ADVICE = "advice"
QUIT = "quit"

Command = Union[Action, str]


def parse_choice(choice: str, tiles: Sequence[int],
                 available: AvailableActions) -> Optional[Command]:
    """Map one line of input to a command, or None if it is not valid here.

    Riichi, chi and multi-tile kan return an Action without the tile or
    option filled in; the caller asks which one.
    """
    choice = choice.strip().lower()
    if choice == "q":
        return QUIT
    if choice == "a" and available.can_discard:
        return ADVICE
    if choice == "t" and available.can_tsumo:
        return Action(ActionType.TSUMO, HUMAN_SEAT)
    if choice == "h" and available.can_ron:
        return Action(ActionType.RON, HUMAN_SEAT)
    if choice == "r" and available.can_riichi:
        return Action(ActionType.RIICHI, HUMAN_SEAT)
    if choice == "p" and available.can_pon:
        return Action(ActionType.PON, HUMAN_SEAT)
    if choice == "c" and available.can_chi:
        option = available.chi_options[0] if len(available.chi_options) == 1 else None
        return Action(ActionType.CHI, HUMAN_SEAT, chi_option=option)
    if choice == "k" and available.can_kan:
        tile = available.kan_tiles[0] if len(available.kan_tiles) == 1 else None
        return Action(ActionType.KAN, HUMAN_SEAT, tile=tile)
    if choice == "s" and not available.can_discard:
        return Action(ActionType.SKIP, HUMAN_SEAT)

    if available.can_discard and choice.isdigit():
        idx = int(choice) - 1
        if 0 <= idx < len(tiles) and tiles[idx] in available.discard_tiles:
            return Action(ActionType.DISCARD, HUMAN_SEAT, tile=tiles[idx])
    return None


def _prompt_parts(available: AvailableActions, n: int) -> List[str]:
    parts = []
    if available.can_discard:
        parts.append(t("prompt.action_discard", n=n))
    if available.can_tsumo:
        parts.append(t("prompt.action_tsumo"))
    if available.can_ron:
        parts.append(t("prompt.action_ron"))
    if available.can_riichi:
        parts.append(t("prompt.action_riichi"))
    if available.can_pon:
        parts.append(t("prompt.action_pon"))
    if available.can_chi:
        parts.append(t("prompt.action_chi"))
    if available.can_kan:
        parts.append(t("prompt.action_kan"))
    if available.can_discard:
        parts.append(t("prompt.action_advice"))
    else:
        parts.append(t("prompt.action_skip"))
    parts.append(t("prompt.action_quit"))
    return parts


def get_player_input(console: Console, game_view: GameView,
                     available: AvailableActions) -> Command:
    """Get a command from the human via terminal input."""
    tiles = display_tiles(game_view)
    prompt = "  > " + " | ".join(_prompt_parts(available, len(tiles))) + ": "

    while True:
        command = parse_choice(console.input(prompt), tiles, available)
        if command is None:
            console.print(f"  [red]{t('prompt.invalid_retry')}[/red]")
            continue
        if not isinstance(command, Action):
            return command

        if command.action_type == ActionType.RIICHI:
            console.print(f"  {t('prompt.choose_riichi_discard')}")
            tile = _choose(console, available.riichi_candidates, tile_to_display_str)
            return Action(ActionType.RIICHI, HUMAN_SEAT, tile=tile)

        if command.action_type == ActionType.CHI and command.chi_option is None:
            console.print(f"  {t('prompt.choose_chi')}")
            option = _choose(console, available.chi_options,
                             lambda pair: " ".join(tile_to_display_str(x) for x in pair))
            return Action(ActionType.CHI, HUMAN_SEAT, chi_option=option)

        if (command.action_type == ActionType.KAN and command.tile is None
                and available.kan_tiles):
            console.print(f"  {t('prompt.choose_kan')}")
            tile = _choose(console, available.kan_tiles, tile_to_display_str)
            return Action(ActionType.KAN, HUMAN_SEAT, tile=tile)

        return command


def _choose(console: Console, options: Sequence, describe):
    """Numbered pick from a short list."""
    for i, option in enumerate(options):
        console.print(f"    {i + 1}. {describe(option)}")
    while True:
        try:
            idx = int(console.input(f"  > {t('prompt.number')} ").strip()) - 1
            if 0 <= idx < len(options):
                return options[idx]
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")
