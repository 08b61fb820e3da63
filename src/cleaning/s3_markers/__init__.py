from .stage import MarkerStage, MarkerResult, strip_legacy_markers

__all__ = ["MarkerStage", "MarkerResult", "strip_legacy_markers"]
