"""
Core application state.

Components:
- state.py: AppState (settings + the single TaskList)
"""
