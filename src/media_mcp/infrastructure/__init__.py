# SPDX-License-Identifier: MIT
"""Filesystem and external-process plumbing shared by the tool handlers."""
