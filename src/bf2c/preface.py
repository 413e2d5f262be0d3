from __future__ import annotations

from importlib import resources


def load_preface() -> str:
    return resources.files('bf2c').joinpath('resources').joinpath('preface.c').read_text(encoding='utf-8')


# Declares the 30000-cell tape and the cursor, and opens main().
PREFACE: str = load_preface()
