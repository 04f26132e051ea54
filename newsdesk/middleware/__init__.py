# -*- coding: utf-8 -*-
"""ASGI middleware."""
