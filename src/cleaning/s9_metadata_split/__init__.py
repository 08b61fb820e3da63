from .stage import MetadataSplitStage, MetadataSplitResult

__all__ = ["MetadataSplitStage", "MetadataSplitResult"]
