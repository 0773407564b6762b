#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/config/serializer.py

import json

from tailshade.core import config as c
from .parser import ConfigDocument, ConfigModule


def serialize_document(document: ConfigDocument) -> str:
    """
    Render a document as an object literal. JSON is a subset of the grammar
    the parser accepts, so the output always loads back. Key order is the
    dict's insertion order.
    """
    return json.dumps(document, indent=c.CONFIG_INDENT, ensure_ascii=False, allow_nan=False)


def serialize_config(module: ConfigModule) -> str:
    """Render a full config file: preamble, export statement, object, newline."""
    body = f"{module.export} {serialize_document(module.document)};\n"
    if module.preamble:
        return f"{module.preamble}\n{body}"
    return body
