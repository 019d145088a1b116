"""Packaged stub templates (``<group>/<name>.stub``)."""
