"""Terminal preview of a composed agreement.

Draws the same DocumentIR the exporters use, so the preview can never drift
from the exported text.
"""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ghana_legal_docs.models.document import DocumentIR, SignatureSection, heading_text


def build_preview(ir: DocumentIR) -> Panel:
    """Rich renderable for the whole agreement"""
    parts = []
    for section in ir.sections:
        heading = heading_text(section)
        if heading:
            parts.append(Text(heading, style="bold"))
        if isinstance(section, SignatureSection):
            grid = Table.grid(expand=True, padding=(0, 4))
            grid.add_column(ratio=1)
            grid.add_column(ratio=1)
            cells = [
                Text.assemble((block.role_label, "bold"), "\n", block.lines()[1], "\n", block.lines()[2])
                for block in section.blocks
            ]
            for i in range(0, len(cells), 2):
                grid.add_row(*cells[i:i + 2])
            parts.append(grid)
        else:
            for paragraph in section.paragraphs:
                parts.append(Text(paragraph, justify="full"))
        parts.append(Text(""))

    return Panel(
        Group(*parts),
        title=Text(ir.title, style="bold"),
        border_style="blue",
        padding=(1, 2),
    )


def preview_command(ir: DocumentIR, console: Console) -> None:
    console.print(build_preview(ir))
