"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskInput, EditDraft, ListQuery)
- errors.py: error taxonomy raised by stores and local validation
- memory_store.py: in-memory TaskStore used by the console front end and tests
"""
