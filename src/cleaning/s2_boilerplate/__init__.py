from .stage import BoilerplateStage, BoilerplateResult

__all__ = ["BoilerplateStage", "BoilerplateResult"]
