from .stage import PaginationStage, PaginationResult, trim_page_tail

__all__ = ["PaginationStage", "PaginationResult", "trim_page_tail"]
