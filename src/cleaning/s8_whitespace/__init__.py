from .stage import WhitespaceStage, WhitespaceResult

__all__ = ["WhitespaceStage", "WhitespaceResult"]
