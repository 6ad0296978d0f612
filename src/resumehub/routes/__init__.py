# src/resumehub/routes/__init__.py
from flask import current_app, request

EXTENSION_KEY = "resumehub"


def get_store():
    return current_app.extensions[EXTENSION_KEY]["store"]


def get_hasher():
    return current_app.extensions[EXTENSION_KEY]["hasher"]


def json_body() -> dict:
    return request.get_json(silent=True) or {}
