"""
Rendering Context

Responsibilities:
- Composes math, cross-reference and citation output into HTML fragments
- Applies equation numbering and semantic CSS classes
- Wraps fragments in standalone preview pages

Owns: Fragment assembly, preview pages
Never: Resolves labels or talks to math engines directly
"""

from texmark.contexts.rendering.assembler import FragmentAssembler
from texmark.contexts.rendering.page import render_page

__all__ = ["FragmentAssembler", "render_page"]
