import math

from omegaconf import OmegaConf


def _pi_resolver(multiple=1.0) -> float:
    """``${pi:1.25}`` -> 1.25 * pi, for writing angles in config files."""
    return math.pi * float(multiple)


def register_resolvers() -> None:
    OmegaConf.register_new_resolver("pi", _pi_resolver, replace=True)
