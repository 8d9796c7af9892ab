"""Markdown and Prompt Rendering Package"""

from prsummary.render.document import DocumentRenderer
from prsummary.render.prompt import PromptRenderer

__all__ = [
    "DocumentRenderer",
    "PromptRenderer",
]
