"""Textual views for the daylaunch menu."""
