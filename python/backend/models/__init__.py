from backend.models.board import Board, Direction, InvalidBoard

__all__ = ["Board", "Direction", "InvalidBoard"]
