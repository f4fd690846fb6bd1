__version__ = "0.1.0"

# Get version changes via
# git log -- britdict/_version.py

version_notes = """
0.1.0: Britannica lookups

- related entries, parts of speech, definitions
- word of the day
- lookup() text rendering for the CLI
- config.ini for domain and timeout

0.0.0: Initial commit

- entries for a word, printed from main.py
"""
