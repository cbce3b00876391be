"""Rendering helpers for the terminal transcript.

Hides the details of how messages and spec lists are drawn.
"""

from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..catalog import Product
from ..config import TIMESTAMP_FORMAT
from ..conversation import Message


def render_message(message: Message, theme_color: str = "blue") -> Panel:
    """Render one transcript entry.

    Bot replies are markdown (numbered lists, bold feature names); user
    messages are shown as plain text so prompt text is never reinterpreted.
    """
    if message.is_user:
        body = Text(message.content)
        title = "[bold]You[/bold]"
        border = theme_color
    else:
        body = Markdown(message.content)
        title = "[bold]AI Sales[/bold]"
        border = "green"

    return Panel(
        body,
        title=title,
        title_align="left",
        subtitle=f"[dim]{message.timestamp.strftime(TIMESTAMP_FORMAT)}[/dim]",
        subtitle_align="right",
        border_style=border,
    )


def render_spec_table(product: Product) -> Table:
    """Render a product's numbered technical specifications."""
    table = Table(
        title=product.name,
        show_header=True,
        header_style="bold cyan",
        show_lines=True,
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("Spec", style="bold")
    table.add_column("Details")

    for i, spec in enumerate(product.specs, 1):
        table.add_row(str(i), spec.title, spec.detail_text)

    return table
