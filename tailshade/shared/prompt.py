#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/shared/prompt.py

from tailshade.core import config as c


def ask_yes_no(question: str) -> bool:
    """Block on a single y/n question. Only 'y' or 'yes' (any case) count as yes."""
    try:
        answer = input(question)
    except EOFError:
        print()
        return False
    return answer.strip().lower() in c.YES_ANSWERS


def always_yes(question: str) -> bool:
    print(f"{question}y")
    return True
