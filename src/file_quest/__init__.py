"""
File Quest - Explore procedurally generated project trees like a dungeon.

This package provides:
- A virtual namespace of files and directories with shell-like navigation
- Themed procedural generation with key and boss placement
- A session layer whose primitive state can be saved and restored
"""

__version__ = "0.1.0"
