"""
Task subsystem.

Components:
- task_models.py: data structures (TaskStatus, NewTask, Task)
"""
