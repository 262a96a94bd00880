import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .grid import InvalidDimensionError
from .rng import random_seed

ENV_PREFIX = "MAZE_"

@dataclass(frozen=True)
class MazeSettings:
    # 20x20 is the page default; walls stay up unless knock_down > 0.
    width: int = 20
    height: int = 20
    seed: Optional[int] = None
    knock_down: int = 0

    def validate(self) -> "MazeSettings":
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensionError(
                f"maze size must be positive, got {self.width}x{self.height}"
            )
        if self.knock_down < 0:
            raise ValueError(f"knock_down must be >= 0, got {self.knock_down}")
        return self

    def override(self, **changes) -> "MazeSettings":
        """Copy with every non-None value in ``changes`` applied, validated."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None}).validate()

    def with_random_seed(self) -> "MazeSettings":
        return replace(self, seed=random_seed())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MazeSettings":
        """Defaults overridden by MAZE_WIDTH / MAZE_HEIGHT / MAZE_SEED / MAZE_KNOCK_DOWN."""
        env = os.environ if environ is None else environ
        base = cls()
        return cls(
            width=_env_int(env, "WIDTH", base.width),
            height=_env_int(env, "HEIGHT", base.height),
            seed=_env_int(env, "SEED", base.seed),
            knock_down=_env_int(env, "KNOCK_DOWN", base.knock_down),
        ).validate()

def _env_int(env: Mapping[str, str], name: str, default):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None

DEFAULTS = MazeSettings()
