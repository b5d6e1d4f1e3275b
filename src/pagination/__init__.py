from .processor import PaginationProcessor, create_default_pagination_processor
from .rules import PAGINATION_RULES, PaginationRuleManager

__all__ = [
    "PAGINATION_RULES",
    "PaginationProcessor",
    "PaginationRuleManager",
    "create_default_pagination_processor",
]
