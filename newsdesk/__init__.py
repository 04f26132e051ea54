# -*- coding: utf-8 -*-
"""Newsdesk: content management backend with a recycle bin for deleted content."""
