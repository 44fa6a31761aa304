"""Worked Python lessons for Rust exercise topics, rust-project.json generation and terminal status lines."""

__version__ = "5.4.0"