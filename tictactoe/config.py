"""
rendering settings, defaults match the original 32px sprite board
"""
import os
from dataclasses import dataclass, replace

ENV_PREFIX = "TICTACTOE_"


@dataclass(frozen=True)
class RenderConfig:
    sprite_width: int = 32
    sprite_height: int = 32
    line_thickness: int = 2            # grid lines between cells
    board_dim: int = 3
    target_frame_rate: int = 8         # repaint ticks per second
    title: str = "Tic Tac Toe"
    asset_dir: str = "assets"
    scale: int = 4                     # initial window size multiplier

    def __post_init__(self):
        for name in ("sprite_width", "sprite_height", "board_dim",
                     "target_frame_rate", "scale"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.line_thickness < 0:
            raise ValueError(f"line_thickness must not be negative, got {self.line_thickness}")

    @property
    def cell_stride_x(self):
        return self.sprite_width + self.line_thickness

    @property
    def cell_stride_y(self):
        return self.sprite_height + self.line_thickness

    @property
    def width(self):
        return self.sprite_width * self.board_dim + self.line_thickness * (self.board_dim - 1)

    @property
    def height(self):
        return self.sprite_height * self.board_dim + self.line_thickness * (self.board_dim - 1)

    def cell_origin(self, col, row):
        """top-left corner of a cell in logical pixels"""
        return col * self.cell_stride_x, row * self.cell_stride_y

    def cell_center(self, col, row):
        x, y = self.cell_origin(col, row)
        return x + self.sprite_width / 2, y + self.sprite_height / 2

    def cell_at(self, x, y):
        """
        cell under a logical point, None on grid lines or outside
        """
        if x < 0 or y < 0:
            return None
        col, dx = divmod(int(x), self.cell_stride_x)
        row, dy = divmod(int(y), self.cell_stride_y)
        if col >= self.board_dim or row >= self.board_dim:
            return None
        if dx >= self.sprite_width or dy >= self.sprite_height:
            return None
        return col, row

    def with_overrides(self, **changes):
        # None means "not given on the command line"
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ=None):
        """
        defaults overridden by TICTACTOE_* environment variables
        """
        env = os.environ if environ is None else environ
        changes = {}
        size = _int_env(env, "SPRITE_SIZE")
        if size is not None:
            changes["sprite_width"] = changes["sprite_height"] = size
        changes["line_thickness"] = _int_env(env, "LINE_THICKNESS")
        changes["target_frame_rate"] = _int_env(env, "FPS")
        changes["scale"] = _int_env(env, "SCALE")
        changes["asset_dir"] = env.get(ENV_PREFIX + "ASSET_DIR") or None
        return cls().with_overrides(**changes)


def _int_env(env, name):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
