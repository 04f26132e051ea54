# -*- coding: utf-8 -*-
"""Repositories, the recycle bin and background jobs."""
