class EvoForageError(Exception):
    """Base for all EvoForage exceptions."""

    pass


# High-level families
class ConfigError(EvoForageError, ValueError):
    """Invalid construction-time configuration."""

    pass


class BrainError(EvoForageError):
    """Genome or retina does not fit the brain topology."""

    pass


class EvolutionError(EvoForageError):
    """Genetic operator received an unusable population."""

    pass
