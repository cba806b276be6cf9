"""
TEXMARK - TeX Math And Reference marKup

Renders math, cross-references and citations from a parsed document into
HTML fragments (MathML or PNG fallback).

Architecture:
- Document Context: Typed nodes, label tables and document diagnostics
- Math Context: Engine registry, math rendering and image alignment
- Linking Context: Equation/block cross-references and citation lists
- Rendering Context: Fragment assembly and preview pages
"""

__version__ = "0.1.0"
