"""
User Use Cases

Account read models for authenticated users.
"""

from .get_profile_use_case import GetProfileUseCase
from .dtos import ProfileView

__all__ = [
    "GetProfileUseCase",
    "ProfileView",
]
