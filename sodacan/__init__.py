"""Headless 2D scene engine core: events, layers, an app loop, ECS scenes, cameras, editor state and YAML scene files."""

__version__ = "0.1.0"