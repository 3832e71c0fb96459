"""
Command-dispatch layer.

Components:
- commands.py: CommandRegistry + default task commands (list/add/mark/unmark/delete/find/sort/help)
- bootstrap.py: composition root (settings, logging, AppState)
"""
