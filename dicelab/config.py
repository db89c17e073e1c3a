from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    biased_weights: List[float] = [0.14, 0.14, 0.14, 0.14, 0.14, 0.30]
    default_prior: List[float] = [1 / 6] * 6
    random_seed: Optional[int] = None
    credible_level: float = 0.95
    log_level: str = "INFO"
    code_version: str = "v1.0.0"

    class Config:
        env_file = ".env"
        env_prefix = "DICELAB_"


settings = Settings()
