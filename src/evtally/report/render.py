"""
Plain-text effort value sheet.

One section per pokemon in declaration order: the name, one indented
``label: value`` line per stat, then a blank line.
"""

import sys
from pathlib import Path

from ..ledger import EntityLedger, StatKind
from ..logging import get_logger

logger = get_logger(__name__)

STDOUT_PATH = "-"


def render_report(ledger: EntityLedger, indent: int = 4) -> str:
    """Render the ledger as an ev sheet. Rendering never mutates the ledger."""
    pad = " " * indent
    lines = []
    for entity in ledger.entities():
        lines.append(entity.name)
        for kind in StatKind:
            lines.append(f"{pad}{kind.label}: {entity.value(kind)}")
        lines.append("")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def write_report(ledger: EntityLedger, path: Path, indent: int = 4, encoding: str = "utf-8") -> Path:
    """
    Write the rendered ev sheet to ``path``; ``-`` writes to stdout.

    Returns:
        The path written to
    """
    text = render_report(ledger, indent=indent)
    if str(path) == STDOUT_PATH:
        sys.stdout.write(text)
        return Path(path)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding=encoding)
    logger.info(f"Wrote ev sheet for {len(ledger)} pokemon to {path}")
    return path
