"""droidgen -- Android code scaffolding from named templates.

Probes an existing Android project for its conventions, then renders the
files of a template (``screen``, ``api``, ``entity``, ``tests``) for a base
name and reports the manual steps left to do.
"""

__version__ = "0.1.0"
