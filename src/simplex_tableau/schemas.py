from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field, model_validator

Status = Literal["optimal", "unbounded", "inapplicable"]


class LPProblem(BaseModel):
    """maximize objective . x  subject to  constraints @ x <= rhs,  x >= 0"""

    name: str = "problem"
    objective: List[float]
    constraints: List[List[float]]
    rhs: List[float]

    @model_validator(mode="after")
    def _check_shapes(self) -> "LPProblem":
        if len(self.constraints) != len(self.rhs):
            raise ValueError(
                f"Problem '{self.name}' has {len(self.constraints)} constraint rows "
                f"but {len(self.rhs)} right-hand-side values."
            )
        n = len(self.objective)
        for idx, row in enumerate(self.constraints):
            if len(row) != n:
                raise ValueError(
                    f"Constraint row {idx} of '{self.name}' has {len(row)} coefficients, expected {n}."
                )
        return self


class SolveOptions(BaseModel):
    precision: int = Field(default=6, ge=0)
    epsilon: float = Field(default=1e-6, gt=0.0)


class OptimalResult(BaseModel):
    status: Literal["optimal"] = "optimal"
    solution: List[float]
    objective_value: float
    iterations: int


class UnboundedResult(BaseModel):
    status: Literal["unbounded"] = "unbounded"
    iterations: int
    message: str = "Unbounded solution"


class InapplicableResult(BaseModel):
    status: Literal["inapplicable"] = "inapplicable"
    iterations: int
    message: str = "The method is not applicable!"


SimplexResult = Annotated[
    Union[OptimalResult, UnboundedResult, InapplicableResult],
    Field(discriminator="status"),
]
