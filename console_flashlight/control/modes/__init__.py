#!/usr/bin/env python3
# __init__.py
# Flashlight phases, each exposing run(light, cfg).

"""Flashlight phases, each exposing run(light, cfg)."""
