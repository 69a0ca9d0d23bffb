"""
Polymer Lint - Static analysis for Polymer component templates.

Rules subscribe to a single forward pass over each document. Findings can be
suppressed per region with `<!-- bplint-disable rule -->` comment directives.
"""

from __future__ import annotations

__version__ = "0.1.0"
