"""Integration tests for the man_files CLI.

This directory contains end-to-end integration tests that exercise full command
execution with real filesystem operations. These tests use Click's CliRunner
and pytest's tmp_path fixture to run the command in isolation.
"""
