# -*- coding: utf-8 -*-
"""Configuration, persistence, logging and error tracking."""
