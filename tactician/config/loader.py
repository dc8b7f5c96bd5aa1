"""Load YAML configs through Hydra and validate them with Pydantic.

Hydra composes the file (defaults lists, interpolations, CLI-style overrides)
into a DictConfig; OmegaConf turns that into plain containers; the Pydantic
model validates the result.

Usage:
    config = load_config(TournamentConfig, "configs", "tournament/nim")
    config = load_config(
        TournamentConfig, "configs", "tournament/nim", overrides=["games_per_matchup=2"]
    )
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import OmegaConf
from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterator

    from omegaconf import DictConfig

T = TypeVar("T", bound=BaseModel)

CONFIG_ROOT = "configs"


def split_config_path(config_arg: str) -> tuple[str, str]:
    """Split a CLI config argument into ``(config_dir, config_name)``.

    ``configs/tournament/nim.yaml`` -> ``("configs", "tournament/nim")``
    ``elsewhere/custom.yaml`` -> ``("elsewhere", "custom")``
    ``nim`` -> ``(".", "nim")``
    """
    config_path = Path(config_arg)
    config_name = config_path.with_suffix("").as_posix()
    prefix = f"{CONFIG_ROOT}/"
    if config_name.startswith(prefix):
        return CONFIG_ROOT, config_name[len(prefix) :]
    config_dir = str(config_path.parent) if config_path.parent.name else "."
    return config_dir, config_path.stem


@contextmanager
def _hydra_session(config_path: str | Path) -> Iterator[None]:
    # Hydra state is global: not safe to use from several threads at once
    GlobalHydra.instance().clear()
    try:
        initialize_config_dir(config_dir=str(Path(config_path).resolve()), version_base=None)
        yield
    finally:
        GlobalHydra.instance().clear()


def load_raw_config(
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> dict[str, Any]:
    """Compose a config into a plain dict, without validation.

    Args:
        config_path: Directory holding the YAML files.
        config_name: File name without ``.yaml``; may include subdirectories.
        overrides: Hydra overrides such as ``["move_time=0.5"]``.
    """
    with _hydra_session(config_path):
        cfg: DictConfig = compose(config_name=config_name, overrides=overrides or [])
        return OmegaConf.to_container(cfg, resolve=True)  # type: ignore[return-value]


def load_config(
    model_class: type[T],
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> T:
    """Compose a config with Hydra and validate it as ``model_class``.

    Raises:
        pydantic.ValidationError: If the composed config does not match the model.
    """
    return model_class.model_validate(load_raw_config(config_path, config_name, overrides))
