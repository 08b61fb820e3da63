from .stage import MergeStage, MergeResult

__all__ = ["MergeStage", "MergeResult"]
