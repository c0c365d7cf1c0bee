from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SolverConfig:
    """Longitude root-finder limits (degrees and days)."""
    max_iterations: int = 10
    tolerance_deg: float = 0.01
    step_tolerance_days: float = 1e-4
    min_rate: float = 0.01  # deg/day; below this the Newton step is not trusted

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")
        if self.tolerance_deg <= 0.0 or self.step_tolerance_days <= 0.0:
            raise ValueError("tolerances must be positive")


@dataclass(frozen=True)
class ChineseConfig:
    # Civil days and month boundaries are reckoned in Beijing time
    utc_offset_hours: float = 8.0


@dataclass(frozen=True)
class BahaiConfig:
    tehran_offset_hours: float = 3.5
    sunset_hour: float = 18.0
    astronomical_from_year: int = 172  # 2015 CE; earlier years start on 21 March


@dataclass(frozen=True)
class PolycalConfig:
    solver: SolverConfig = field(default_factory=SolverConfig)
    chinese: ChineseConfig = field(default_factory=ChineseConfig)
    bahai: BahaiConfig = field(default_factory=BahaiConfig)
    use_delta_t: bool = True


DEFAULT_CONFIG = PolycalConfig()
