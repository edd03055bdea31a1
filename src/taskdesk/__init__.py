"""
taskdesk: task-management view-models over an injected task store.

Subsystems:
- tasks/: data structures, errors and the in-memory reference store
- ui/: components (item view, list view, create form, board) and toasts
- core/: ports (Protocols), event plumbing, application state
- cli/ + connectors/: console front end
"""

__version__ = "0.1.0"
