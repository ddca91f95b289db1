from backend.engine.gamesolver.solver import (
    SearchCancelled,
    SearchExhausted,
    Solution,
    Solver,
    solve,
)

__all__ = ["SearchCancelled", "SearchExhausted", "Solution", "Solver", "solve"]
