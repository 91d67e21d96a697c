"""Tkinter UI components: themes, the scene canvas and the two pages."""
