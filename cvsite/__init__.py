"""
CVSITE - Static resume site renderer and JSON resume editor

Reads and writes a single structured resume document (resume.json) through two
independent front ends that share one schema.

Architecture:
- Document Context: Resume schema, loading, session state
- Editor Context: Form projection, form serialization, JSON export
- Rendering Context: Read-only HTML markup and page metadata
"""

__version__ = "0.1.0"
