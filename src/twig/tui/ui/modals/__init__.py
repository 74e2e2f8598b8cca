"""
Modal screens for twig.

Modified: 2026-10-18
"""

from .confirm_delete_modal import ConfirmDeleteModal, render_confirm_prompt

__all__ = ["ConfirmDeleteModal", "render_confirm_prompt"]
