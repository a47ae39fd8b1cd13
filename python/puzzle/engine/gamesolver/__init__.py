from puzzle.engine.gamesolver.solver import Solver, SolverLimitError

__all__ = ["Solver", "SolverLimitError"]
