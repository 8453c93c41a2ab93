"""scqbf: GRASP local search for the Set-Covering Quadratic Binary Function problem."""

__version__ = "0.1.0"

from scqbf.evaluate.solution import Solution
from scqbf.instance.models import Instance
from scqbf.instance.reader import read_instance
from scqbf.search import SolverConfig, solve

__all__ = ["Instance", "Solution", "SolverConfig", "read_instance", "solve", "__version__"]
