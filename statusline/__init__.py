"""status-line - a single-line status summary for AI coding agent sessions.

Reads the session descriptor from stdin and prints the working directory,
git branch and context token usage as one colorized line.
"""

__version__ = "1.0.0"
__author__ = "jhivandb"
