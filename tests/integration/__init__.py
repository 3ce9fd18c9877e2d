"""Integration tests.

Purpose
- Exercise real interactions with the filesystem and child processes.

Guidelines
- Work under ``tmp_path``; never touch the user's data or log directories.
- Minimize mocking; run real commands where the platform allows it.
- Mark as 'integration' and keep them slower but reliable.
"""
