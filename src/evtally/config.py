import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

REPORT_FORMATS = ("text", "json")


@dataclass
class Settings:
    input_path: Path = Path("evlist.txt")
    output_path: Path = Path("evsheet.txt")
    encoding: str = "utf-8"
    capacity: Optional[int] = None
    report_format: str = "text"
    indent: int = 4

    def __post_init__(self) -> None:
        if self.capacity is not None and self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity}")
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from exc
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(
                f"Unknown report format: {self.report_format!r}. "
                f"Expected one of {', '.join(REPORT_FORMATS)}"
            )
