"""Filesystem, subprocess, and workspace access."""
