"""
db/ - Database Layer
====================
Handles the SQLite connection and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
