from .api import ApiError, ImdbAPI
from .models import ImdbConfig, ImdbList, ImdbListItem
from .parser import ListParseError

__all__ = ["ApiError", "ImdbAPI", "ImdbConfig", "ImdbList", "ImdbListItem", "ListParseError"]
