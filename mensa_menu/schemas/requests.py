"""
Request and response bodies for the translate and explain endpoints.
"""

from typing import Dict, List

from pydantic import BaseModel, field_validator

from .menu import AppLanguage, CamelModel, DailyMenu, TranslationLanguage


class TranslationRequest(CamelModel):
    """
    Body of POST /translate.

    Example:
        {"menu": {...DailyMenu...}, "language": "ko"}
    """
    menu: DailyMenu
    language: TranslationLanguage = TranslationLanguage.EN


class ExplanationRequest(CamelModel):
    """
    Body of POST /explain.

    Example:
        {"dishName": "Königsberger Klopse", "language": "en"}
    """
    dish_name: str
    language: AppLanguage = AppLanguage.EN

    @field_validator("dish_name")
    @classmethod
    def dish_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Dish name is required")
        return value


class ExplanationResponse(BaseModel):
    explanation: str


class SweepResponse(BaseModel):
    deleted: Dict[str, List[str]]
