"""Configuration management for Shark (shark.toml parsing + defaults)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ImportError:
    try:
        import tomli as tomllib  # type: ignore[no-redef]
    except ImportError:
        tomllib = None  # type: ignore[assignment]


COLOR_MODES = ("auto", "enable", "disable")


@dataclass
class GeneralConfig:
    verbose: bool = False
    color: str = "auto"


@dataclass
class SuggestConfig:
    extra_commands: list[str] = field(default_factory=list)
    path_commands: list[str] = field(
        default_factory=lambda: [
            "show",
            "move",
            "copy",
            "search",
            "view",
            "compare",
            "info",
            "rename",
            "remove",
            "delete",
            "archive",
            "sync",
            "watch",
            "stat",
            "link",
        ]
    )


@dataclass
class DangerConfig:
    guarded_commands: list[str] = field(default_factory=lambda: ["remove", "delete"])
    display_width: int = 512


@dataclass
class SharkConfig:
    """Complete Shark configuration.

    Created once by the CLI root and passed down explicitly; nothing in
    Shark reads verbose or color state from anywhere else.
    """

    general: GeneralConfig = field(default_factory=GeneralConfig)
    suggest: SuggestConfig = field(default_factory=SuggestConfig)
    danger: DangerConfig = field(default_factory=DangerConfig)

    @property
    def verbose(self) -> bool:
        return self.general.verbose

    @property
    def color(self) -> str:
        return self.general.color


def load_config(project_path: Path | None = None) -> SharkConfig:
    """Load configuration from shark.toml if present, otherwise return defaults."""
    config = SharkConfig()

    if project_path is None:
        project_path = Path.cwd()

    config_file = project_path / "shark.toml"
    if not config_file.exists():
        return config

    if tomllib is None:
        return config

    with open(config_file, "rb") as f:
        data = tomllib.load(f)

    if "general" in data:
        gen = data["general"]
        if "verbose" in gen:
            config.general.verbose = bool(gen["verbose"])
        if gen.get("color") in COLOR_MODES:
            config.general.color = gen["color"]

    if "suggest" in data:
        s = data["suggest"]
        for attr in ("extra_commands", "path_commands"):
            if attr in s:
                setattr(config.suggest, attr, list(s[attr]))

    if "danger" in data:
        d = data["danger"]
        if "guarded_commands" in d:
            config.danger.guarded_commands = list(d["guarded_commands"])
        if "display_width" in d:
            config.danger.display_width = max(1, int(d["display_width"]))

    return config
