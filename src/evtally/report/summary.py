"""
JSON export of a finished ledger.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict

from ..ledger import EntityLedger
from ..logging import get_logger
from .render import STDOUT_PATH

logger = get_logger(__name__)

SUMMARY_VERSION = "1.0"


def build_summary(ledger: EntityLedger) -> Dict[str, Any]:
    return {
        "version": SUMMARY_VERSION,
        "total_entities": len(ledger),
        "entities": [
            {
                "id": entity.id,
                "name": entity.name,
                "effort_values": entity.labelled(),
                "total": entity.total(),
            }
            for entity in ledger.entities()
        ],
    }


def write_summary_json(ledger: EntityLedger, path: Path, encoding: str = "utf-8") -> Path:
    """Write the ledger summary as JSON; ``-`` writes to stdout."""
    text = json.dumps(build_summary(ledger), indent=2, ensure_ascii=False) + "\n"
    if str(path) == STDOUT_PATH:
        sys.stdout.write(text)
        return Path(path)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding) as f:
        f.write(text)
    logger.info(f"Wrote JSON summary to {path}")
    return path
