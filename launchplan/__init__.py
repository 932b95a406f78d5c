# Launchplan Package
"""
Launch plans for search: named URL templates with per-query routing rules.

Modules:
  - search: Plan model, template routing and URL resolution
  - services: Plan parsing and client-side plan persistence
  - web: FastAPI app with the launch and edit actions
  - cli: Resolve a query from the command line
"""

__version__ = "0.1.0"
