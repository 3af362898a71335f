from .tsp import TSPProblem
from .types import Evaluation, FunctionalProblem, ProblemProtocol

__all__ = ["TSPProblem", "Evaluation", "FunctionalProblem", "ProblemProtocol"]
