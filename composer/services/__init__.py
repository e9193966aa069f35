"""Password generation services."""

from composer.services.password_composer import PasswordComposer

__all__ = [
    "PasswordComposer",
]
