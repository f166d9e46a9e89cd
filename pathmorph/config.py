"""Library configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Numeric tuning for parsing and curve solving.

    Every value has a default; environment variables prefixed with
    ``PATHMORPH_`` override them (e.g. ``PATHMORPH_SOLVER_TOLERANCE=1e-9``).
    """

    model_config = SettingsConfigDict(env_prefix="PATHMORPH_", extra="ignore")

    # Curve solver
    solver_tolerance: float = 1e-6  # max |x(t) - x| accepted after Newton polish
    solver_max_iterations: int = 16  # Newton steps per lookup
    root_epsilon: float = 1e-9  # slack when accepting roots just outside [0, 1]

    # Normalizer
    arc_segment_degrees: float = 90.0  # max sweep covered by one cubic when splitting arcs


settings = Settings()
