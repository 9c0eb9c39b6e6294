# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Output runtime for colorextractor.

Serialization of extracted colors for the command line and for callers
that hand results to other tools. The runtime never modifies colors.
"""

from colorextractor.runtime.serializers import SerializerFormat, serialize_colors

__all__ = ["SerializerFormat", "serialize_colors"]
