# config.py
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from phongtrace.core.color import Color

NAMED_COLORS = {
    "white": Color.white,
    "black": Color.black,
    "red": Color.red,
    "green": Color.green,
    "blue": Color.blue,
    "yellow": Color.yellow,
    "cyan": Color.cyan,
    "magenta": Color.magenta,
    "transparent": Color.transparent,
}


def parse_color(name: str) -> Color:
    """
    Resolves a named color, or a hex string like "#RRGGBB" / "#AARRGGBB".
    """
    key = name.strip().lower()
    if key in NAMED_COLORS:
        return NAMED_COLORS[key]()
    if key.startswith("#") and len(key) in (7, 9):
        value = int(key[1:], 16)
        if len(key) == 7:
            value |= 0xFF000000
        return Color.from_argb(value)
    raise ValueError(f"Unknown color: {name!r}")


@dataclass
class RenderConfig:
    """Render settings; defaults match the demo scene window."""
    width: int = 600
    height: int = 600
    fov: float = 60.0
    ray_length: float = 10.0
    background: str = "green"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0 < self.fov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.fov}")
        if self.ray_length <= 0:
            raise ValueError(f"Ray length must be positive, got {self.ray_length}")
        parse_color(self.background)

    @property
    def background_color(self) -> Color:
        return parse_color(self.background)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
