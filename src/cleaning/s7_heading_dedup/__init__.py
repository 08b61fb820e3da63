from .stage import HeadingDedupStage, HeadingDedupResult

__all__ = ["HeadingDedupStage", "HeadingDedupResult"]
