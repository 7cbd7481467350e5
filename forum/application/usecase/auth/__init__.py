"""Auth use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]
