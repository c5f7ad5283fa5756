"""Lesson screens."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from mahjong_tutor.core.tile import make_tiles_from_string
from mahjong_tutor.lessons.content import LESSON_ORDER, Lesson
from mahjong_tutor.ui.i18n import t
from mahjong_tutor.ui.tile_display import tiles_to_rich_text


def render_lesson(console: Console, lesson: Lesson, clear: bool = True):
    """Render one lesson: intro, then each section with its example tiles."""
    if clear:
        console.clear()

    parts = [Text(lesson.intro, style="italic"), Text()]
    for section in lesson.sections:
        parts.append(Text(section.heading, style="bold cyan"))
        parts.append(Text(f"  {section.body}"))
        if section.tiles:
            parts.append(Text("  ").append_text(
                tiles_to_rich_text(make_tiles_from_string(section.tiles))))
        parts.append(Text())

    n = LESSON_ORDER.index(lesson.lesson_id) + 1
    console.print(Panel(
        Group(*parts),
        title=f"[bold]{lesson.title}[/bold]",
        subtitle=f"[dim]{t('label.lesson', n=n, total=len(LESSON_ORDER))}[/dim]",
        border_style="green",
        padding=(1, 2),
    ))
