"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter)
- errors.py: exceptions raised by the list and the store
- task_list.py: in-memory ordered task container
- task_store.py: pipe-delimited flat-file storage
"""
