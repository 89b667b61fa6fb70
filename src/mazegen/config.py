from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class MazeConfig:
    # 10x10 cells in a 400px window.
    rows: int = 10
    columns: int = 10
    algorithm: str = "sidewinder"
    seed: Optional[int] = None
    cell_size: int = 40

    def __post_init__(self):
        if self.rows < 1 or self.columns < 1:
            raise ValueError(f"rows and columns must be >= 1, got {self.rows}x{self.columns}")
        if self.cell_size < 4:
            raise ValueError("cell_size must be at least 4 pixels")

    @property
    def window_size(self):
        return (self.columns * self.cell_size, self.rows * self.cell_size)

# Global defaults (tools read these for their argparse defaults)
DEFAULTS = MazeConfig()
