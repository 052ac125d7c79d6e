"""Jinja2 templates rendered by Berth.

Template files live beside this module and are loaded by
berth.addons.renderer.TemplateRenderer.
"""
