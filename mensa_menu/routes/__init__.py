"""
Routes Package for Mensa Menu
=============================

Each module defines a FastAPI APIRouter with related endpoints:

- menu.py: today's menu and the allergen/additive label tables
- translate.py: menu translation through the translation cache
- explain.py: dish explanations through the explanation cache
- admin.py: cache maintenance

Route Dependencies:
-------------------
Services are injected with FastAPI's Depends():

    container: ServiceContainer = Depends(get_container)

The container is created once in create_app() and stored on app.state, so
tests can pass their own container with memory stores and a fake backend.
"""

from .admin import admin_router
from .explain import explain_router
from .menu import menu_router
from .translate import translate_router

__all__ = [
    "admin_router",
    "explain_router",
    "menu_router",
    "translate_router",
]
