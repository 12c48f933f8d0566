"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep test output free of JSON log lines and never write log files
os.environ.setdefault("RANDOM_VERSE_LOG_LEVEL", "critical")
os.environ["RANDOM_VERSE_LOG_TO_FILE"] = "false"
