# -*- coding: utf-8 -*-
"""HTTP API."""
