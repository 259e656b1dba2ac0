"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ZERO_TIME)
- task_store.py: in-memory storage + scan helpers
"""
