from .stage import MarkerResolutionStage, MarkerResolutionResult, ensure_closing_delimiter

__all__ = ["MarkerResolutionStage", "MarkerResolutionResult", "ensure_closing_delimiter"]
