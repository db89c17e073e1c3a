from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field, field_validator

from dicelab.analysis import as_face_vector

DiceMode = Literal["biased", "unbiased"]


class DiceEstimate(BaseModel):
    mode: DiceMode
    n_rolls: int
    counts: List[int]
    probabilities: List[float]
    prior: List[float]
    posterior: List[float]
    bayes_estimator: List[float]
    map_estimator: List[float]
    credible_intervals: Optional[List[Tuple[float, float]]] = None
    code_version: Optional[str] = None


class SimulationRequest(BaseModel):
    mode: DiceMode
    n_rolls: int = Field(default=100, ge=0)
    seed: Optional[int] = None
    prior: Optional[List[float]] = None

    @field_validator("prior")
    @classmethod
    def check_prior(cls, value):
        if value is None:
            return value
        return as_face_vector(value, "prior")
