from .stage import DateReflowStage, DateReflowResult

__all__ = ["DateReflowStage", "DateReflowResult"]
