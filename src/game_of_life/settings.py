"""Optional TOML settings file for the command-line tools.

Every key is optional; missing sections and keys fall back to the defaults
below. Example::

    [input]
    format = "rle"

    [output]
    log_level = "DEBUG"
    log_file = "logs/life.log"

    [display]
    window_width = 800
    window_height = 800
    cell_color = "lime"
    background_color = "black"
    pause = 0.05
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DisplaySettings:
    window_width: int = 600
    window_height: int = 600
    background_color: str = "black"
    cell_color: str = "green"
    pause: float = 0.1


@dataclass
class Settings:
    board_format: str = "auto"
    log_level: str = "INFO"
    log_file: Path | None = None
    display: DisplaySettings = field(default_factory=DisplaySettings)


def load_settings(path: str | Path | None = None) -> Settings:
    if path is None:
        return Settings()

    path = Path(path)
    with open(path, "rb") as f:
        cfg = tomllib.load(f)

    i = cfg.get("input", {})
    o = cfg.get("output", {})
    d = cfg.get("display", {})

    log_file = o.get("log_file")
    if log_file is not None:
        log_file = path.parent / log_file

    return Settings(
        board_format=str(i.get("format", "auto")).lower(),
        log_level=str(o.get("log_level", "INFO")).upper(),
        log_file=log_file,
        display=DisplaySettings(
            window_width=int(d.get("window_width", 600)),
            window_height=int(d.get("window_height", 600)),
            background_color=str(d.get("background_color", "black")),
            cell_color=str(d.get("cell_color", "green")),
            pause=float(d.get("pause", 0.1)),
        ),
    )
